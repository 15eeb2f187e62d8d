"""Backend and frontend file generation.

Creates the project directory tree and writes the fixed set of files that
make up the Express/Mongoose backend skeleton, plus the frontend env sample
written after ``create-react-app`` has populated the frontend directory.

Every method lets ``OSError`` and ``ValueError`` (e.g. a project name that
cannot be encoded as UTF-8) propagate; the provisioner decides how a
failure affects the run.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from mernkit.config import Config

from .templates import TemplateRenderer, write_file


# ---------------------------------------------------------------------------
# Backend manifest
# ---------------------------------------------------------------------------

BACKEND_DEPENDENCIES: dict[str, str] = {
    "express": "^4.21.1",
    "mongoose": "^8.7.1",
    "cors": "^2.8.5",
    "dotenv": "^16.4.5",
}

BACKEND_DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.1.7",
}

# Template name -> output file name, relative to ``backend/``
BACKEND_FILES: dict[str, str] = {
    "backend/constants.js.j2": "constants.js",
    "backend/server.js.j2": "server.js",
    "backend/env.example.j2": ".env.example",
    "backend/gitignore.j2": ".gitignore",
    "backend/README.md.j2": "README.md",
}

FRONTEND_ENV_TEMPLATE = "frontend/env.example.j2"


def build_backend_manifest(config: Config) -> dict[str, Any]:
    """Return the backend ``package.json`` content as a dict."""
    return {
        "name": config.backend_package_name,
        "version": "1.0.0",
        "main": "server.js",
        "scripts": {
            "start": "node server.js",
            "dev": "nodemon server.js",
        },
        "dependencies": dict(BACKEND_DEPENDENCIES),
        "devDependencies": dict(BACKEND_DEV_DEPENDENCIES),
    }


def render_backend_manifest(config: Config) -> str:
    """Serialise the backend manifest the way npm writes it (2-space indent)."""
    return json.dumps(build_backend_manifest(config), indent=2) + "\n"


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes the parts of the project this tool owns.

    The frontend application itself is produced by ``create-react-app``;
    the only frontend file written here is ``.env.example``.
    """

    def __init__(self, config: Config, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config."""
        return {
            "project_name": self.config.project_name,
            "backend_port": self.config.backend_port,
            "api_url": self.config.api_url,
        }

    # -- Directory structure -----------------------------------------------

    async def create_root(self) -> Path:
        """Create the project root (and missing parents)."""
        root = self.config.project_root
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
        return root

    async def create_backend_structure(self) -> list[Path]:
        """Create ``backend/`` and its fixed, empty subdirectories.

        Existing directories are left alone.
        """
        backend = self.config.backend_dir
        dirs = [backend] + [backend / name for name in self.config.backend_dirs]

        def _mkdirs() -> None:
            for d in dirs:
                d.mkdir(parents=True, exist_ok=True)

        await asyncio.to_thread(_mkdirs)
        return dirs

    # -- Files -------------------------------------------------------------

    async def write_backend_files(self) -> list[Path]:
        """Render the backend templates and write ``package.json``.

        Existing files are overwritten, so re-running with the same project
        name reproduces identical content.
        """
        backend = self.config.backend_dir
        ctx = self.build_context()
        written: list[Path] = []

        for template_name, output_name in BACKEND_FILES.items():
            path = await self.renderer.render_to_file(
                template_name, backend / output_name, ctx
            )
            written.append(path)

        manifest_path = backend / "package.json"
        await write_file(manifest_path, render_backend_manifest(self.config))
        written.append(manifest_path)
        return written

    async def write_frontend_env(self) -> Path:
        """Write ``frontend/.env.example`` pointing at the local backend API."""
        return await self.renderer.render_to_file(
            FRONTEND_ENV_TEMPLATE,
            self.config.frontend_dir / ".env.example",
            self.build_context(),
        )
