"""
Admin routes
Dashboard plus category and script management, all behind require_admin
"""

import logging

from flask import Blueprint, redirect, render_template, url_for

from scripthub.decorators import require_admin
from scripthub.forms import CategoryForm, ScriptForm
from scripthub.routes import request_data
from scripthub.services.catalog_service import DuplicateSlugError

logger = logging.getLogger(__name__)


def create_blueprint(catalog):
    """Build the admin blueprint around a catalog service"""
    bp = Blueprint('admin', __name__)

    def back_to_dashboard():
        return redirect(url_for('admin.dashboard'))

    @bp.route('/', methods=['GET'])
    @bp.route('', methods=['GET'])
    @require_admin
    def dashboard():
        """Every script and every category"""
        scripts = catalog.list_scripts()
        categories = catalog.list_categories()
        return render_template('admin/dashboard.html', title='Admin',
                               scripts=scripts, categories=categories)

    # Categories

    @bp.route('/categories', methods=['POST'])
    @require_admin
    def create_category():
        """Create a category; duplicates are dropped without a message"""
        form = CategoryForm.from_mapping(request_data())
        result = form.validate()
        if not result.ok:
            logger.info(f"[Admin] Category rejected: {', '.join(result.errors)}")
            return back_to_dashboard()

        try:
            catalog.create_category(form)
        except DuplicateSlugError as e:
            logger.warning(f"[Admin] Ignoring duplicate category: {e}")
        return back_to_dashboard()

    # url_for builds the first rule registered, i.e. the innermost one
    @bp.route('/categories/<int:category_id>', methods=['DELETE'])
    @bp.route('/categories/<int:category_id>/delete', methods=['POST'])
    @require_admin
    def delete_category(category_id):
        """Delete a category; scripts using it keep a dangling reference"""
        catalog.delete_category(category_id)
        return back_to_dashboard()

    # Scripts

    @bp.route('/scripts/new', methods=['GET'])
    @require_admin
    def new_script():
        """New script form"""
        return render_template('admin/new_script.html', title='Nuevo script',
                               categories=catalog.list_categories())

    @bp.route('/scripts', methods=['POST'])
    @require_admin
    def create_script():
        """Create a script from the submitted form"""
        form = ScriptForm.from_mapping(request_data())
        result = form.validate()
        if not result.ok:
            logger.info(f"[Admin] Script rejected: {', '.join(result.errors)}")
            return back_to_dashboard()

        try:
            catalog.create_script(form)
        except DuplicateSlugError as e:
            logger.warning(f"[Admin] Ignoring duplicate script: {e}")
        return back_to_dashboard()

    @bp.route('/scripts/<int:script_id>/edit', methods=['GET'])
    @require_admin
    def edit_script(script_id):
        """Edit form; unknown ids go back to the dashboard"""
        script = catalog.get_script(script_id)
        if not script:
            return back_to_dashboard()
        return render_template('admin/edit_script.html', title='Editar script',
                               script=script, categories=catalog.list_categories())

    @bp.route('/scripts/<int:script_id>', methods=['POST', 'PUT'])
    @require_admin
    def update_script(script_id):
        """Rewrite a script from the submitted form"""
        form = ScriptForm.from_mapping(request_data())
        result = form.validate()
        if not result.ok:
            logger.info(f"[Admin] Update of script {script_id} rejected: {', '.join(result.errors)}")
            return back_to_dashboard()

        try:
            catalog.update_script(script_id, form)
        except DuplicateSlugError as e:
            logger.warning(f"[Admin] Ignoring update of script {script_id}: {e}")
        return back_to_dashboard()

    @bp.route('/scripts/<int:script_id>', methods=['DELETE'])
    @bp.route('/scripts/<int:script_id>/delete', methods=['POST'])
    @require_admin
    def delete_script(script_id):
        """Delete a script"""
        catalog.delete_script(script_id)
        return back_to_dashboard()

    return bp
