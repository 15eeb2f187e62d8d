"""mernkit provisioning sequence.

Runs the fixed, ordered steps that turn a project name into a MERN skeleton:

1. Check the installed Node.js version.
2. Create the project root.
3. Create the backend directory tree.
4. Write the backend files.
5. ``git init`` the backend (a failure only warns).
6. ``npm install`` in the backend.
7. ``npx create-react-app`` the frontend.
8. Write the frontend ``.env.example``.
9. Print the usage guide.

Every step reports a ``StepResult``. The first fatal result stops the run;
nothing already written is rolled back. Filesystem steps treat ``OSError``
and ``ValueError`` (unencodable or NUL-containing names) as fatal failures.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from mernkit.config import Config
from mernkit.environment import check_node_version
from mernkit.reporter import print_completion
from mernkit.results import ProvisionResult, Severity, StepResult
from mernkit.scaffolder import ProjectGenerator
from mernkit.utils import (
    describe_failure,
    print_error,
    print_step,
    print_success,
    print_warning,
    run_command,
)

Step = Callable[[], Awaitable[StepResult]]


class Provisioner:
    """Drives the provisioning steps for a single project.

    Attributes:
        config: Immutable settings for this run.
        generator: Writes the directories and files this tool owns.
    """

    def __init__(self, config: Config, generator: ProjectGenerator | None = None) -> None:
        self.config = config
        self.generator = generator or ProjectGenerator(config)

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    def steps(self) -> list[Step]:
        return [
            self.check_environment,
            self.create_root,
            self.create_backend_structure,
            self.write_backend_files,
            self.init_git,
            self.install_dependencies,
            self.create_frontend,
            self.write_frontend_env,
        ]

    async def run(self) -> ProvisionResult:
        """Execute every step in order.

        Returns:
            A ``ProvisionResult`` whose ``success`` is ``False`` when a step
            failed fatally. Recoverable failures are printed as warnings and
            recorded, and the run continues.
        """
        result = ProvisionResult(project_name=self.config.project_name)

        for step in self.steps():
            outcome = await step()
            result.steps.append(outcome)
            if outcome.ok:
                continue
            if outcome.severity is Severity.RECOVERABLE:
                print_warning(f"⚠️ {outcome.message}")
                continue
            print_error(f"❌ {outcome.message}")
            return result

        print_completion(self.config.project_name)
        return result

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def check_environment(self) -> StepResult:
        return await check_node_version(self.config)

    async def create_root(self) -> StepResult:
        try:
            await self.generator.create_root()
        except (OSError, ValueError) as exc:
            return StepResult.fatal("root", f"Failed to create root directory: {exc}")
        print_success("✅ Root directory created successfully.")
        return StepResult.success("root")

    async def create_backend_structure(self) -> StepResult:
        print_step("📦 Creating backend app...")
        try:
            await self.generator.create_backend_structure()
        except (OSError, ValueError) as exc:
            return StepResult.fatal(
                "backend-structure",
                f"Failed to create backend directory structure: {exc}",
            )
        print_success("✅ Backend directory structure created.")
        return StepResult.success("backend-structure")

    async def write_backend_files(self) -> StepResult:
        try:
            await self.generator.write_backend_files()
        except (OSError, ValueError) as exc:
            return StepResult.fatal("backend-files", f"Failed to create backend files: {exc}")
        print_success("✅ Backend files created successfully.")
        return StepResult.success("backend-files")

    async def init_git(self) -> StepResult:
        print_step("🔧 Initializing Git repository in backend...")
        returncode, _, _ = await run_command(["git", "init", str(self.config.backend_dir)])
        if returncode != 0:
            return StepResult.recoverable(
                "git-init",
                "Git is not installed or an error occurred. Skipping Git initialization.",
            )
        print_success("✅ Git repository initialized in backend.")
        return StepResult.success("git-init")

    async def install_dependencies(self) -> StepResult:
        print_step("📦 Installing backend dependencies...")
        cmd = ["npm", "install"]
        returncode, _, stderr = await run_command(cmd, cwd=self.config.backend_dir)
        if returncode != 0:
            return StepResult.fatal(
                "dependencies",
                f"Failed to install backend dependencies: {describe_failure(cmd, returncode, stderr)}",
            )
        print_success("✅ Backend dependencies installed.")
        return StepResult.success("dependencies")

    async def create_frontend(self) -> StepResult:
        print_step("📦 Creating React frontend app...")
        cmd = ["npx", "create-react-app", str(self.config.frontend_dir)]
        returncode, _, stderr = await run_command(cmd)
        if returncode != 0:
            return StepResult.fatal(
                "frontend",
                f"Failed to create React app: {describe_failure(cmd, returncode, stderr)}",
            )
        print_success("✅ React frontend created successfully.")
        return StepResult.success("frontend")

    async def write_frontend_env(self) -> StepResult:
        try:
            await self.generator.write_frontend_env()
        except (OSError, ValueError) as exc:
            return StepResult.fatal(
                "frontend-env", f"Failed to create frontend .env.example file: {exc}"
            )
        print_success("✅ Frontend .env.example file created.")
        return StepResult.success("frontend-env")
