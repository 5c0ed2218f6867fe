"""Turn an `--on` target into a path relative to the project root."""

from pathlib import Path

from tack_it_on.errors import PathOutsideProjectError


def relativize(
    on_path: str | Path | None,
    project_dir: Path,
    *,
    cwd: Path | None = None,
) -> str | None:
    """Return on_path relative to project_dir, as a POSIX string.

    Stored paths are project relative so the notes stay valid when the
    project is checked out somewhere else.

    Args:
        on_path: Target file or directory. Relative paths are taken relative
            to cwd. None means "not tacked onto anything".
        project_dir: The project root (the directory holding `.tacked`).
        cwd: Base for relative targets; defaults to the process cwd.

    Returns:
        The relative path ("." for the project root itself), or None.

    Raises:
        FileNotFoundError: The target does not exist.
        PathOutsideProjectError: The target resolves outside project_dir.
    """
    if on_path is None:
        return None

    target = Path(on_path).expanduser()
    if not target.is_absolute():
        target = (cwd or Path.cwd()) / target
    resolved = target.resolve(strict=True)
    root = project_dir.resolve()

    try:
        relative = resolved.relative_to(root)
    except ValueError as e:
        raise PathOutsideProjectError(resolved, root) from e
    return relative.as_posix()
