"""UnitChecker using mypy for type analysis.

Quantities carry their units only as type parameters, so unit mistakes are found by
type checking rather than at runtime. This module runs mypy in-process over user
code together with this library and reports the resulting diagnostics.
"""

import logging
from pathlib import Path

from mypy.build import BuildSource, build
from mypy.errors import CompileError
from mypy.options import Options

from .errors import UnitCheckerError, parse_mypy_diagnostic

logger = logging.getLogger(__name__)

CHECKER_DIR = Path(__file__).resolve().parent
PACKAGE_DIR = CHECKER_DIR.parent


class UnitChecker:
    """Type checks files against the quantity types and collects unit errors."""

    @staticmethod
    def _find_py_files_and_modules(paths: list[Path]) -> list[tuple[Path, str]]:
        """Find all Python files with module names from a list of paths.

        Returns:
            List of tuples: (absolute file path, module name)
        """
        result: list[tuple[Path, str]] = []
        for input_path in paths:
            input_path = input_path.resolve()
            if input_path.is_file() and input_path.suffix == ".py":
                module_name = UnitChecker._module_name_from_path(input_path)
                result.append((input_path, module_name))
            elif input_path.is_dir():
                for file_path in sorted(input_path.rglob("*.py")):
                    file_path = file_path.resolve()
                    module_name = UnitChecker._module_name_from_path(file_path)
                    result.append((file_path, module_name))
        return result

    @staticmethod
    def _module_name_from_path(file_path: Path) -> str:
        """Compute the module name for a Python file, including all parent packages.

        For __init__.py, returns the package name.
        """
        if file_path.name == "__init__.py":
            parts = []
        else:
            parts = [file_path.with_suffix("").name]
        current = file_path.parent
        while (current / "__init__.py").exists():
            parts.insert(0, current.name)
            current = current.parent
        return ".".join(parts)

    @staticmethod
    def _python_path_roots(files_and_modules: list[tuple[Path, str]]) -> set[Path]:
        """Return the directories from which the given modules are importable."""
        roots: set[Path] = set()
        for file_path, module_name in files_and_modules:
            depth = len(module_name.split("."))
            if file_path.name == "__init__.py":
                depth += 1
            root = Path(*file_path.parts[:-depth])
            # mypy refuses to run with site-packages on its search path
            if root.name in ("site-packages", "dist-packages"):
                continue
            roots.add(root)
        return roots

    def __init__(self) -> None:
        """Initialise a new checker."""
        self.errors: list[UnitCheckerError] = []

    def check(self, paths: list[Path]) -> None:
        """Run unit checks on the given file(s) or directory(ies).

        Errors found in the requested files are appended to ``self.errors``; errors
        in other modules, including this library, are ignored.

        Args:
            paths: List of file or directory paths to analyze.
        """
        files_and_modules = self._find_py_files_and_modules(paths)
        requested_files = {file_path for file_path, _ in files_and_modules}

        # the quantity library is always built from source so it resolves however
        # it is installed; this checker is left out as it would pull in mypy itself
        library = [
            (file_path, module_name)
            for file_path, module_name in self._find_py_files_and_modules(
                [PACKAGE_DIR]
            )
            if CHECKER_DIR not in file_path.parents
        ]
        modules = {
            module_name: file_path
            for file_path, module_name in [*library, *files_and_modules]
        }
        logger.debug(
            "Checking %d file(s) with %d module(s) in the build",
            len(requested_files),
            len(modules),
        )

        for message in self._mypy_build(
            modules, self._python_path_roots(files_and_modules)
        ):
            error = parse_mypy_diagnostic(message)
            if error is None or error.path is None:
                continue
            if error.path.resolve() not in requested_files:
                continue
            logger.debug("%s:%d: %s", error.path, error.lineno, error.message)
            self.errors.append(error)

    @staticmethod
    def _mypy_build(modules: dict[str, Path], roots: set[Path]) -> list[str]:
        """Type check the given modules and return mypy's diagnostic lines."""
        options = Options()
        options.incremental = False
        options.show_traceback = True
        options.namespace_packages = True
        options.ignore_missing_imports = True
        options.follow_imports = "silent"
        options.show_absolute_path = True
        options.mypy_path = sorted(str(root) for root in roots)

        sources = [
            BuildSource(str(file_path), module_name, None)
            for module_name, file_path in modules.items()
        ]
        try:
            return build(sources=sources, options=options).errors
        except CompileError as exc:
            # blocking errors, e.g. a syntax error in one of the sources
            return exc.messages
