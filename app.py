import logging

from flask import Flask, Response, abort, current_app, jsonify, request
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import get_config
from constants import (
    UNITS_BY_CATEGORY,
    BASE_UNITS,
    CATEGORY_DEFAULT_UNITS,
    MAX_INGREDIENTS,
    MAX_SHARE_ID_LENGTH,
)
from models import db
from services import (
    IncompatibleUnitsError,
    category_of,
    RecipeSession,
    compute_cost,
    convert,
    cost_per_base_unit,
    export_csv,
    export_filename,
    format_currency,
    parse_quantity,
    parse_unit,
)
from services.storage import (
    delete_saved_recipe,
    get_saved_recipe,
    get_shared_recipe,
    list_saved_recipes,
    save_recipe,
    share_recipe,
)

logger = logging.getLogger(__name__)

migrate = Migrate()

# JSON field name -> IngredientLine attribute
FIELD_NAMES = {
    'name': 'name',
    'usedQuantity': 'used_quantity',
    'usedUnit': 'used_unit',
    'packageCost': 'package_cost',
    'packageSize': 'package_size',
    'packageUnit': 'package_unit',
}


def create_app(env=None, config_overrides=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    if config_overrides:
        app.config.update(config_overrides)

    share_id_length = app.config['SHARE_ID_LENGTH']
    if not 1 <= share_id_length <= MAX_SHARE_ID_LENGTH:
        raise ValueError(
            f'SHARE_ID_LENGTH must be between 1 and {MAX_SHARE_ID_LENGTH} (got {share_id_length})'
        )

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    db.init_app(app)
    migrate.init_app(app, db)
    register_error_handlers(app)
    register_routes(app)
    return app


# ============================================
# HELPERS
# ============================================

def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='Expected a JSON object')
    return data


def recipe_body(data):
    record = data.get('recipe', data)
    if not isinstance(record, dict):
        abort(400, description='Expected a recipe object')
    ingredients = record.get('ingredients') or []
    if not isinstance(ingredients, list):
        abort(400, description='Recipe ingredients must be a list')
    if len(ingredients) > MAX_INGREDIENTS:
        abort(400, description=f'A recipe can have at most {MAX_INGREDIENTS} ingredients')
    return record


def unit_arg(value):
    """Resolve a posted unit; unknown text is kept so it fails to convert."""
    if value is None:
        return None
    return parse_unit(value) or str(value)


def session_options():
    return {'default_unit': current_app.config['DEFAULT_INGREDIENT_UNIT']}


def summary_json(summary):
    return {
        'totalCost': summary.total_cost,
        'scaledTotalCost': summary.scaled_total_cost,
        'totalServings': summary.total_servings,
        'costPerServing': summary.cost_per_serving,
        'ingredientCount': summary.ingredient_count,
        'display': {
            'totalCost': format_currency(summary.total_cost),
            'scaledTotalCost': format_currency(summary.scaled_total_cost),
            'costPerServing': format_currency(summary.cost_per_serving),
        },
    }


def session_json(session):
    return {
        'recipe': session.to_record(),
        'summary': summary_json(session.summary()),
        'messages': [{'level': level, 'message': message} for level, message in session.messages],
    }


def field_name(name):
    if not isinstance(name, str) or name not in FIELD_NAMES:
        abort(400, description=f'Unknown ingredient field: {name}')
    return FIELD_NAMES[name]


def edit_fields(edit):
    fields = edit.get('fields') or {}
    if not isinstance(fields, dict):
        abort(400, description='Edit fields must be an object')
    return {field_name(k): v for k, v in fields.items()}


def apply_edit(session, edit):
    """Apply one edit from an /api/recipe/edit request to the session."""
    if not isinstance(edit, dict):
        abort(400, description='Each edit must be an object')
    action = edit.get('action')
    ingredient_id = edit.get('id')

    try:
        if action == 'add':
            session.add_ingredient(**edit_fields(edit))
        elif action == 'update':
            if 'fields' in edit:
                session.update_ingredient_fields(ingredient_id, edit_fields(edit))
            else:
                session.update_ingredient(ingredient_id, field_name(edit.get('field')), edit.get('value'))
        elif action == 'delete':
            session.delete_ingredient(ingredient_id)
        elif action == 'duplicate':
            session.duplicate_ingredient(ingredient_id)
        elif action == 'clear':
            session.clear_all()
        elif action == 'servings':
            session.set_servings(edit.get('value'))
        elif action == 'batchMultiplier':
            session.set_batch_multiplier(edit.get('value'))
        else:
            abort(400, description=f'Unknown edit action: {action}')
    except KeyError:
        abort(404, description=f'Ingredient {ingredient_id} not found')


# ============================================
# ERROR HANDLERS
# ============================================

def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(IncompatibleUnitsError)
    def handle_incompatible_units(e):
        return jsonify({'error': str(e), 'fromUnit': e.from_unit, 'toUnit': e.to_unit}), 400


# ============================================
# ROUTES
# ============================================

def register_routes(app):

    @app.route('/api/units')
    def units():
        return jsonify({
            'categories': {category: list(units) for category, units in UNITS_BY_CATEGORY.items()},
            'baseUnits': BASE_UNITS,
            'defaultPackageUnits': CATEGORY_DEFAULT_UNITS,
        })

    @app.route('/api/convert', methods=['POST'])
    def convert_quantity():
        data = json_body()
        value = parse_quantity(data.get('value'))
        from_unit = unit_arg(data.get('fromUnit'))
        to_unit = unit_arg(data.get('toUnit'))
        result = convert(value, from_unit, to_unit)
        return jsonify({'value': value, 'fromUnit': from_unit, 'toUnit': to_unit, 'result': result})

    @app.route('/api/cost', methods=['POST'])
    def ingredient_cost():
        data = json_body()
        used_quantity = parse_quantity(data.get('usedQuantity'))
        used_unit = unit_arg(data.get('usedUnit'))
        package_cost = parse_quantity(data.get('packageCost'))
        package_size = parse_quantity(data.get('packageSize'))
        package_unit = unit_arg(data.get('packageUnit'))

        result = compute_cost(used_quantity, used_unit, package_cost, package_size, package_unit)

        per_base_unit = None
        if package_size > 0 and category_of(package_unit) is not None:
            per_base_unit = cost_per_base_unit(package_cost, package_size, package_unit)

        return jsonify({
            'cost': result.cost,
            'display': format_currency(result.cost),
            'costPerBaseUnit': per_base_unit,
            'warning': result.warning,
        })

    @app.route('/api/recipe/summary', methods=['POST'])
    def recipe_summary():
        record = recipe_body(json_body())
        session = RecipeSession.from_record(record, **session_options())
        return jsonify(session_json(session))

    @app.route('/api/recipe/edit', methods=['POST'])
    def recipe_edit():
        data = json_body()
        record = recipe_body(data)
        edits = data.get('edits') or []
        if not isinstance(edits, list):
            abort(400, description='Edits must be a list')

        session = RecipeSession.from_record(record, **session_options())
        # Warnings from recomputing the loaded record are not part of this edit
        session.messages = []
        for edit in edits:
            apply_edit(session, edit)
        return jsonify(session_json(session))

    @app.route('/api/recipe/export.csv', methods=['POST'])
    def recipe_export_csv():
        record = recipe_body(json_body())
        session = RecipeSession.from_record(record, **session_options())
        filename = export_filename(session.name)
        return Response(
            export_csv(session),
            mimetype='text/csv',
            headers={'Content-Disposition': f'attachment; filename="{filename}"'},
        )

    # ---- saved recipes ----

    @app.route('/api/recipes', methods=['GET'])
    def recipes_list():
        return jsonify({'recipes': list_saved_recipes()})

    @app.route('/api/recipes', methods=['POST'])
    def recipes_save():
        record = recipe_body(json_body())
        saved = save_recipe(record, **session_options())
        return jsonify(saved), 201

    @app.route('/api/recipes/<recipe_id>', methods=['GET'])
    def recipes_get(recipe_id):
        record = get_saved_recipe(recipe_id)
        if record is None:
            abort(404, description=f'Recipe {recipe_id} not found')
        return jsonify(record)

    @app.route('/api/recipes/<recipe_id>', methods=['DELETE'])
    def recipes_delete(recipe_id):
        if not delete_saved_recipe(recipe_id):
            abort(404, description=f'Recipe {recipe_id} not found')
        return jsonify({'deleted': recipe_id})

    # ---- sharing ----

    @app.route('/api/share', methods=['POST'])
    def share_create():
        record = recipe_body(json_body())
        share_id = share_recipe(record, id_length=current_app.config['SHARE_ID_LENGTH'],
                                **session_options())
        return jsonify({'shareId': share_id}), 201

    @app.route('/api/share/<share_id>', methods=['GET'])
    def share_get(share_id):
        record = get_shared_recipe(share_id)
        if record is None:
            abort(404, description='Shared recipe not found')
        return jsonify(record)


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()


app = create_app()


if __name__ == '__main__':
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
