"""mernkit configuration.

A single, immutable ``Config`` value carries the project name, the directory
the project is created in, and the handful of constants baked into the
generated project. It is built once by the CLI and handed to every step.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


BACKEND_DIRS: tuple[str, ...] = (
    "controllers",
    "db",
    "middlewares",
    "models",
    "routes",
    "utils",
)


class Config(BaseModel):
    """Settings for one ``create`` invocation.

    The project name is used verbatim; no sanitization is applied beyond
    what the filesystem and npm reject on their own.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str
    base_dir: Path = Field(default_factory=Path.cwd)
    min_node_major: int = Field(default=14, ge=0)
    backend_port: int = Field(default=5000, ge=1, le=65535)
    backend_dirs: tuple[str, ...] = Field(default=BACKEND_DIRS)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_root(self) -> Path:
        """``<base_dir>/<project_name>``."""
        return self.base_dir / self.project_name

    @property
    def backend_dir(self) -> Path:
        return self.project_root / "backend"

    @property
    def frontend_dir(self) -> Path:
        return self.project_root / "frontend"

    @property
    def api_url(self) -> str:
        """Default backend API URL written into the frontend env sample."""
        return f"http://localhost:{self.backend_port}/api"

    @property
    def backend_package_name(self) -> str:
        return f"{self.project_name}-backend"
