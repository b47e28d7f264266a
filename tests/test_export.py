import csv
import io

from services.export import export_csv, export_filename
from services.recipe import RecipeSession


def make_session():
    session = RecipeSession.from_record({
        'name': 'Pancakes',
        'servings': 4,
        'batchMultiplier': 2,
        'ingredients': [
            {'id': 'a', 'name': 'Flour', 'usedQuantity': 2, 'usedUnit': 'cup',
             'packageCost': 5, 'packageSize': 20, 'packageUnit': 'cup'},
            {'id': 'b', 'name': 'Eggs', 'usedQuantity': 2, 'usedUnit': 'unit',
             'packageCost': 3, 'packageSize': 12, 'packageUnit': 'unit'},
        ],
    })
    return session


def test_export_csv_layout():
    rows = list(csv.reader(io.StringIO(export_csv(make_session()))))

    assert rows[0] == ['Pancakes']
    assert rows[1] == []
    assert rows[2][0] == 'Ingredient Name'
    assert rows[3] == ['Flour', '2', 'cup', '$5.00', '20', 'cup', '$0.50']
    assert rows[4] == ['Eggs', '2', 'unit', '$3.00', '12', 'unit', '$0.50']
    assert rows[5] == []

    summary = dict(row for row in rows[6:])
    assert summary['Total Cost'] == '$1.00'
    assert summary['Servings Per Recipe'] == '4'
    assert summary['Batches to Make'] == '2'
    assert summary['Total Servings'] == '8'
    assert summary['Total Cost (All Batches)'] == '$2.00'
    assert summary['Cost Per Serving'] == '$0.25'


def test_export_quotes_every_cell():
    text = export_csv(make_session())
    assert text.splitlines()[0] == '"Pancakes"'


def test_export_title_fallback():
    session = RecipeSession()
    rows = list(csv.reader(io.StringIO(export_csv(session))))
    assert rows[0] == ['Recipe Cost Breakdown']


def test_export_filename():
    assert export_filename('Mom\'s Pie!') == 'Mom_s_Pie__cost_breakdown.csv'
    assert export_filename('') == 'recipe_cost_breakdown.csv'
    assert export_filename('Soup', 'xlsx') == 'Soup_cost_breakdown.xlsx'
