"""mernkit scaffolder -- writes the files this tool owns.

Quick usage::

    from mernkit.config import Config
    from mernkit.scaffolder import ProjectGenerator

    generator = ProjectGenerator(Config(project_name="shop"))
    await generator.create_root()
    await generator.create_backend_structure()
    await generator.write_backend_files()
"""

from mernkit.scaffolder.generator import ProjectGenerator, build_backend_manifest
from mernkit.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "TemplateRenderer",
    "build_backend_manifest",
]
