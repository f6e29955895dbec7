from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.engine import URL

# SQLAlchemy driver used for each store adapter
DRIVERS: dict[str, str] = {
    "mysql": "mysql+pymysql",
    "sqlite": "sqlite",
}


class ConnectionSettings(BaseModel):
    """Store connection parameters. The defaults are the benchmark's fixed values."""

    model_config = ConfigDict(frozen=True)

    adapter: Literal["mysql", "sqlite"] = "mysql"
    database: str = "ao_test2"
    username: str | None = "root"
    password: str | None = "mysqlroot"
    host: str | None = "localhost"
    echo: bool = True

    @property
    def url(self) -> URL:
        if self.adapter == "sqlite":
            return URL.create(DRIVERS[self.adapter], database=self.database)
        return URL.create(
            DRIVERS[self.adapter],
            username=self.username,
            password=self.password,
            host=self.host,
            database=self.database,
        )

    @property
    def jdbc_url(self) -> str:
        if self.adapter == "sqlite":
            return f"jdbc:sqlite:{self.database}"
        return f"jdbc:{self.adapter}://{self.host}/{self.database}"


class ClassPathSettings(BaseModel):
    """Where the JVM side of the benchmark keeps its compiled classes and libraries."""

    model_config = ConfigDict(frozen=True)

    classes_dir: Path = Path("bin")
    libs_dir: Path = Path("lib")
    extra_paths: list[Path] = Field(
        default_factory=lambda: [Path("..") / "ActiveObjects" / "bin"]
    )
