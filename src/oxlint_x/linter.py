"""High level lint / format / check operations on in-memory source text.

Each operation:
1. Resolves the config (inline options merged under the nearest
   .oxlintrc.json)
2. Writes the source (and a non-empty merged config) to scratch files
3. Runs oxlint against the scratch copy
4. Removes the scratch files, even on error
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from oxlint_x.config import Settings, get_settings
from oxlint_x.core.binary import BinaryProvider
from oxlint_x.core.config_resolver import ResolvedConfig, resolve_config
from oxlint_x.core.diff_engine import generate_differences
from oxlint_x.core.runner import OxlintOutputError, OxlintRunner
from oxlint_x.core.temp_files import TempFileRegistry
from oxlint_x.models.diagnostics import LintResult
from oxlint_x.models.problems import CheckReport
from oxlint_x.reporting import diagnostic_problems, difference_problems


class OxlintLinter:
    """Facade over config resolution, scratch files and the oxlint runner."""

    def __init__(
        self,
        settings: Settings | None = None,
        runner: OxlintRunner | None = None,
        registry: TempFileRegistry | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.runner = runner or OxlintRunner(
            BinaryProvider(self.settings.runner.binary_path, self.settings.runner.search_root),
            timeout=self.settings.runner.timeout_seconds,
            max_output_bytes=self.settings.runner.max_output_bytes,
        )
        self.registry = registry or TempFileRegistry(
            self.settings.temp_dir, default_extension=self.settings.files.default_extension
        )

    def resolve(self, file_path: Path | str, options: dict[str, Any] | None = None) -> ResolvedConfig:
        """Merged configuration that oxlint would run with for file_path."""
        return resolve_config(file_path, options, self.settings.files.config_file_name)

    def _config_args(self, resolved: ResolvedConfig, created: list[Path]) -> list[str]:
        if resolved.config:
            config_path = self.registry.create_config_file(resolved.config)
            created.append(config_path)
            return ["--config", str(config_path)]
        if resolved.source_path is not None:
            return ["--config", str(resolved.source_path)]
        return []

    def lint(self, code: str, file_path: Path | str, options: dict[str, Any] | None = None) -> LintResult:
        """Lint code as if it were the contents of file_path.

        Raises:
            OxlintExecutionError: If oxlint cannot be run
            OxlintOutputError: If oxlint output is not a valid JSON report
        """
        resolved = self.resolve(file_path, options)

        with self.registry.scratch_files() as created:
            source_path = self.registry.create_source_file(code, file_path)
            created.append(source_path)

            args = ["--format=json", "--no-ignore", source_path.name]
            args.extend(self._config_args(resolved, created))

            result = self.runner.execute(args, cwd=source_path.parent)

        stdout = result.stdout.strip()
        if not stdout:
            return LintResult()
        try:
            return LintResult.model_validate(json.loads(stdout))
        except (json.JSONDecodeError, ValidationError) as e:
            raise OxlintOutputError(f"Failed to parse oxlint output: {e}\nOutput: {result.stdout}") from e

    def format(self, code: str, file_path: Path | str, options: dict[str, Any] | None = None) -> str:
        """Return code after ``oxlint --fix``.

        Raises:
            OxlintExecutionError: If oxlint cannot be run
        """
        resolved = self.resolve(file_path, options)

        with self.registry.scratch_files() as created:
            source_path = self.registry.create_source_file(code, file_path)
            created.append(source_path)

            args = ["--fix", source_path.name]
            args.extend(self._config_args(resolved, created))

            self.runner.execute(args, cwd=source_path.parent)
            with open(source_path, encoding="utf-8", newline="") as f:
                return f.read()

    def check(self, code: str, file_path: Path | str, options: dict[str, Any] | None = None) -> CheckReport:
        """Lint and format code, reporting diagnostics and fixable edits.

        An empty file_path yields an empty report without running oxlint.
        """
        if not file_path:
            return CheckReport(file_path="")

        result = self.lint(code, file_path, options)
        formatted = self.format(code, file_path, options)
        differences = generate_differences(code, formatted) if formatted != code else []

        logger.debug(
            "{}: {} diagnostic(s), {} fixable edit(s)",
            file_path,
            len(result.diagnostics),
            len(differences),
        )

        problems = diagnostic_problems(code, result) + difference_problems(code, differences)
        return CheckReport(
            file_path=str(file_path),
            problems=problems,
            formatted=formatted,
            differences=differences,
        )
