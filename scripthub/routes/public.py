"""
Public routes
Home listing, category listing, script detail and the health check
"""

from flask import Blueprint, abort, render_template


def create_blueprint(catalog):
    """Build the public blueprint around a catalog service"""
    bp = Blueprint('public', __name__)

    @bp.route('/', methods=['GET'])
    def home():
        """All scripts, newest first"""
        scripts = catalog.list_scripts()
        return render_template('home.html', title='Inicio', scripts=scripts)

    @bp.route('/categoria/<slug>', methods=['GET'])
    def category(slug):
        """Scripts in one category"""
        found = catalog.get_category_by_slug(slug)
        if not found:
            abort(404)
        scripts = catalog.list_scripts_in_category(found['id'])
        return render_template('category.html', title=found['name'], category=found, scripts=scripts)

    @bp.route('/script/<slug>', methods=['GET'])
    def script(slug):
        """Script detail"""
        found = catalog.get_script_by_slug(slug)
        if not found:
            abort(404)
        return render_template('script.html', title=found['title'], script=found)

    @bp.route('/health', methods=['GET'])
    def health():
        """Liveness check for process supervisors; never touches the store"""
        return {'status': 'ok'}

    return bp
