from __future__ import annotations

import argparse
import ast
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

DOMAIN_FORBIDDEN_MODULES = {
    "fastapi",
    "pydantic",
    "sqlalchemy",
    "alembic",
    "boto3",
    "botocore",
    "httpx",
    "requests",
    "opentelemetry",
    "prometheus_client",
    "foodhub.api",
    "foodhub.infrastructure",
}

# Business modules talk to each other only through ports wired in foodhub.api.
BUSINESS_MODULES = ("menu", "restaurant", "user")

DEFAULT_SCAN_PATH = Path(__file__).resolve().parents[1] / "src" / "foodhub"


@dataclass(frozen=True)
class Violation:
    file_path: Path
    line: int
    module: str
    rule: str


def _python_files(root: Path) -> Iterable[Path]:
    if root.is_file() and root.suffix == ".py":
        yield root
        return
    if root.is_dir():
        yield from root.rglob("*.py")


def _matches(module: str, prefixes: Iterable[str]) -> bool:
    for prefix in prefixes:
        if module == prefix or module.startswith(f"{prefix}."):
            return True
    return False


def _owning_module(file_path: Path) -> str | None:
    parts = file_path.parts
    if "foodhub" not in parts:
        return None
    index = len(parts) - 1 - parts[::-1].index("foodhub")
    if index + 1 < len(parts) and parts[index + 1] in BUSINESS_MODULES:
        return parts[index + 1]
    return None


def _forbidden_for(file_path: Path) -> list[tuple[str, set[str]]]:
    rules: list[tuple[str, set[str]]] = []
    if "domain" in file_path.parts:
        forbidden = set(DOMAIN_FORBIDDEN_MODULES)
        forbidden.update(f"foodhub.{name}.infrastructure" for name in BUSINESS_MODULES)
        rules.append(("domain-purity", forbidden))

    owner = _owning_module(file_path)
    if owner is not None:
        others = {f"foodhub.{name}" for name in BUSINESS_MODULES if name != owner}
        rules.append(("module-boundary", others))
    return rules


def _imported_modules(tree: ast.AST) -> Iterable[tuple[int, str]]:
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield node.lineno, alias.name
        elif isinstance(node, ast.ImportFrom) and node.module:
            yield node.lineno, node.module


def _scan_file(file_path: Path) -> list[Violation]:
    rules = _forbidden_for(file_path)
    if not rules:
        return []

    tree = ast.parse(file_path.read_text(encoding="utf-8"), filename=str(file_path))
    violations: list[Violation] = []
    for line, module in _imported_modules(tree):
        for rule, forbidden in rules:
            if _matches(module, forbidden):
                violations.append(
                    Violation(file_path=file_path, line=line, module=module, rule=rule)
                )
    return violations


def find_violations(paths: Sequence[Path]) -> list[Violation]:
    violations: list[Violation] = []
    for path in paths:
        for file_path in _python_files(path):
            violations.extend(_scan_file(file_path))
    return violations


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dependency policy check for domain purity and module boundaries."
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="Path to scan (repeatable). Defaults to src/foodhub.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    scan_paths = [Path(item) for item in args.path] if args.path else [DEFAULT_SCAN_PATH]

    violations = find_violations(scan_paths)
    if not violations:
        print("depcheck passed")
        return 0

    print("depcheck failed: forbidden imports detected")
    for violation in violations:
        print(f"{violation.file_path}:{violation.line} -> {violation.module} [{violation.rule}]")
    return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
