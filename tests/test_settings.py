from scripthub.settings import Settings


def test_defaults_cover_every_setting():
    for key in ['PORT', 'HOST', 'SECRET_KEY', 'ADMIN_USER', 'ADMIN_PASS', 'DB_FILE']:
        assert getattr(Settings, key)
    assert Settings.DB_FILE.endswith('data.db')
    assert len(Settings.DEFAULT_CATEGORIES) == 5


def test_load_config_overrides(tmp_path, monkeypatch):
    config = tmp_path / 'config.py'
    config.write_text("ADMIN_USER = 'root'\nDB_DIR = '/srv/scripts'\n", encoding='utf-8')

    for key in Settings.OVERRIDABLE:
        monkeypatch.setattr(Settings, key, getattr(Settings, key))

    assert Settings.load_config(config)
    assert Settings.ADMIN_USER == 'root'
    assert Settings.DB_FILE.replace('\\', '/') == '/srv/scripts/data.db'


def test_load_config_missing_file(tmp_path):
    assert not Settings.load_config(tmp_path / 'absent.py')


def test_load_config_broken_file(tmp_path):
    config = tmp_path / 'config.py'
    config.write_text("this is not python\n", encoding='utf-8')
    assert not Settings.load_config(config)


def test_app_config_uses_overrides(app, tmp_path):
    assert app.config['ADMIN_PASS'] == 'secret'
    assert app.config['DB_FILE'] == str(tmp_path / 'db' / 'data.db')
    assert app.config['PORT'] == Settings.PORT
