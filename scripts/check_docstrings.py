"""Check that all code blocks in docstrings are properly closed and runnable as doctests."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeGuard

import rich
import rich.table
import rich.text

import pyoutcome as po

SRC_DIR = Path().joinpath("src", "pyoutcome")
CODE_BLOCK_PATTERN = re.compile(r"^\s*```(\w*)\s*$")
SKIP_DECORATORS = frozenset({"overload", "override", "wraps"})


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Errors found in a single docstring."""

    file_path: Path
    func_name: str
    details: list[ErrorDetail]


def _is_documentable(node: ast.AST) -> TypeGuard[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def _parse(file_path: Path) -> po.Result[ast.Module, SyntaxError]:
    return po.safe(ast.parse, exceptions=(SyntaxError,))(
        file_path.read_text(encoding="utf-8")
    )


def _check_code_blocks(
    docstring: str, start_line: int
) -> po.Result[None, list[ErrorDetail]]:
    """Check that code blocks are closed and that python blocks hold a doctest prompt."""
    errors: list[ErrorDetail] = []
    opened: po.Option[tuple[int, str, list[str]]] = po.NONE
    for idx, line in enumerate(docstring.split("\n")):
        fence = CODE_BLOCK_PATTERN.match(line)
        if fence is None:
            opened.for_each(lambda block, line=line: block[2].append(line))
            continue
        language = fence.group(1)
        if opened.is_some() and not language:
            _, lang, body = opened.unwrap()
            if lang == "python" and not any(">>>" in b for b in body):
                errors.append(
                    ErrorDetail(start_line + idx, "python block without `>>>` prompt")
                )
            opened = po.NONE
        elif opened.is_some():
            errors.append(ErrorDetail(start_line + idx, "Nested ``` block"))
        else:
            opened = po.Some((start_line + idx, language or "plaintext", []))
    opened.for_each(
        lambda block: errors.append(
            ErrorDetail(block[0], f"Unclosed ```{block[1]} block")
        )
    )
    return po.Err(errors) if errors else po.Ok(None)


def _process_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> po.Option[DocstringError]:
    docstring = po.Option.from_nullable(ast.get_docstring(node))
    if docstring.is_none():
        is_public = not node.name.startswith("_")
        if is_public and node.col_offset == 0 and not _has_skip_decorator(node):
            return po.Some(
                DocstringError(
                    file_path,
                    node.name,
                    [ErrorDetail(node.lineno, "Missing docstring")],
                )
            )
        return po.NONE
    return (
        _check_code_blocks(docstring.unwrap(), node.lineno)
        .err()
        .map(lambda details: DocstringError(file_path, node.name, details))
    )


def _check_file(file_path: Path) -> list[DocstringError]:
    return _parse(file_path).match(
        lambda tree: [
            error
            for node in ast.walk(tree)
            if _is_documentable(node)
            for error in _process_node(file_path, node)
        ],
        lambda exc: [
            DocstringError(
                file_path, "<module>", [ErrorDetail(exc.lineno or 0, exc.msg)]
            )
        ],
    )


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in _check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.details[0].line_no}",
            error.func_name,
            "\n".join(d.message for d in error.details),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )


if __name__ == "__main__":
    main()
