from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ormbench.config import ClassPathSettings, ConnectionSettings


class TestConnectionSettings:
    def test_fixed_defaults(self):
        settings = ConnectionSettings()

        assert settings.adapter == "mysql"
        assert settings.database == "ao_test2"
        assert settings.username == "root"
        assert settings.password == "mysqlroot"
        assert settings.host == "localhost"

    def test_mysql_url(self):
        url = ConnectionSettings().url

        assert url.drivername == "mysql+pymysql"
        assert url.username == "root"
        assert url.password == "mysqlroot"
        assert url.host == "localhost"
        assert url.database == "ao_test2"

    def test_sqlite_url_ignores_credentials(self, tmp_path):
        url = ConnectionSettings(adapter="sqlite", database=str(tmp_path / "x.db")).url

        assert url.drivername == "sqlite"
        assert url.database == str(tmp_path / "x.db")
        assert url.username is None

    def test_jdbc_url(self):
        assert ConnectionSettings(database="ao_test").jdbc_url == (
            "jdbc:mysql://localhost/ao_test"
        )

    def test_sqlite_jdbc_url_has_no_host(self, tmp_path):
        settings = ConnectionSettings(adapter="sqlite", database=str(tmp_path / "x.db"))

        assert settings.jdbc_url == f"jdbc:sqlite:{tmp_path / 'x.db'}"
        assert "None" not in settings.jdbc_url

    def test_unknown_adapter(self):
        with pytest.raises(ValidationError):
            ConnectionSettings(adapter="oracle")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            ConnectionSettings().database = "other"


class TestClassPathSettings:
    def test_defaults(self):
        settings = ClassPathSettings()

        assert settings.classes_dir == Path("bin")
        assert settings.libs_dir == Path("lib")
        assert settings.extra_paths == [Path("../ActiveObjects/bin")]
