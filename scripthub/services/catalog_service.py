"""
Catalog Service
Owns every SQL statement touching categories and scripts
"""

import sqlite3
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from scripthub.forms import CategoryForm, ScriptForm
from scripthub.utils.slug import generate_slug

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

SCRIPT_WITH_CATEGORY = '''
    SELECT s.*, c.name AS category_name, c.slug AS category_slug
    FROM scripts s
    LEFT JOIN categories c ON c.id = s.category_id
'''

NEWEST_FIRST = ' ORDER BY s.created_at DESC, s.id DESC'


class DuplicateSlugError(Exception):
    """Raised when a name or title collides with an existing unique value"""

    def __init__(self, entity: str, slug: str):
        super().__init__(f"{entity} with slug '{slug}' already exists")
        self.entity = entity
        self.slug = slug


def utc_now() -> str:
    """Current time as an ISO-8601 UTC string, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class CatalogService:
    """Service for category and script persistence"""

    def __init__(self, database):
        self.db = database

    # Categories

    def list_categories(self) -> List[Row]:
        return self.db.fetchall('SELECT * FROM categories ORDER BY name')

    def count_categories(self) -> int:
        row = self.db.fetchone('SELECT COUNT(*) AS c FROM categories')
        return row['c']

    def get_category_by_slug(self, slug: str) -> Optional[Row]:
        return self.db.fetchone('SELECT * FROM categories WHERE slug = ?', (slug,))

    def create_category(self, form: CategoryForm) -> int:
        """Insert a category, return its id; DuplicateSlugError on name/slug collision"""
        try:
            _, category_id = self.db.execute(
                'INSERT INTO categories (name, slug) VALUES (?, ?)',
                (form.name, form.slug),
            )
        except sqlite3.IntegrityError as e:
            raise DuplicateSlugError('category', form.slug) from e
        logger.info(f"Created category {form.name!r} ({form.slug})")
        return category_id

    def delete_category(self, category_id: int) -> bool:
        """Delete by id; scripts that reference it are left as they are"""
        rowcount, _ = self.db.execute('DELETE FROM categories WHERE id = ?', (category_id,))
        return rowcount > 0

    def seed_default_categories(self, names) -> bool:
        """Insert the default categories in one transaction when none exist"""
        if not names or self.count_categories() > 0:
            return False
        self.db.transaction([
            ('INSERT INTO categories (name, slug) VALUES (?, ?)', (name, generate_slug(name)))
            for name in names
        ])
        logger.info(f"Seeded {len(names)} default categories")
        return True

    # Scripts

    def list_scripts(self) -> List[Row]:
        return self.db.fetchall(SCRIPT_WITH_CATEGORY + NEWEST_FIRST)

    def list_scripts_in_category(self, category_id: int) -> List[Row]:
        return self.db.fetchall(
            SCRIPT_WITH_CATEGORY + ' WHERE s.category_id = ?' + NEWEST_FIRST,
            (category_id,),
        )

    def get_script_by_slug(self, slug: str) -> Optional[Row]:
        return self.db.fetchone(SCRIPT_WITH_CATEGORY + ' WHERE s.slug = ?', (slug,))

    def get_script(self, script_id: int) -> Optional[Row]:
        return self.db.fetchone('SELECT * FROM scripts WHERE id = ?', (script_id,))

    def create_script(self, form: ScriptForm) -> int:
        """Insert a script stamped with the current time, return its id"""
        now = utc_now()
        try:
            _, script_id = self.db.execute(
                '''INSERT INTO scripts (title, slug, description, code, created_at, updated_at, category_id)
                   VALUES (?, ?, ?, ?, ?, ?, ?)''',
                (form.title, form.slug, form.description or '', form.code, now, now, form.category_id),
            )
        except sqlite3.IntegrityError as e:
            raise DuplicateSlugError('script', form.slug) from e
        logger.info(f"Created script {form.title!r} ({form.slug})")
        return script_id

    def update_script(self, script_id: int, form: ScriptForm) -> bool:
        """Rewrite every field, recompute the slug and refresh updated_at"""
        try:
            rowcount, _ = self.db.execute(
                '''UPDATE scripts
                   SET title = ?, slug = ?, description = ?, code = ?, updated_at = ?, category_id = ?
                   WHERE id = ?''',
                (form.title, form.slug, form.description or '', form.code, utc_now(),
                 form.category_id, script_id),
            )
        except sqlite3.IntegrityError as e:
            raise DuplicateSlugError('script', form.slug) from e
        return rowcount > 0

    def delete_script(self, script_id: int) -> bool:
        rowcount, _ = self.db.execute('DELETE FROM scripts WHERE id = ?', (script_id,))
        return rowcount > 0
