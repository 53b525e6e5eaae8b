from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, Tuple

# Ищем в cwd и рядом с этим файлом (корень проекта), .env раньше .env.local
_DEFAULT_NAMES = (".env", ".env.local")


def _candidate_paths(extra: Iterable[str]) -> list[Path]:
    paths = [Path(c) for c in extra if c]
    proj_root = Path(__file__).resolve().parent
    for name in _DEFAULT_NAMES:
        paths.append(Path.cwd() / name)
        paths.append(proj_root / name)
    return paths


def parse_env_lines(text: str) -> Iterator[Tuple[str, str]]:
    """Yield KEY, VALUE pairs from .env-style text.

    Blank lines and ``#`` comments are skipped, a leading ``export`` is
    allowed, surrounding quotes are stripped from the value.
    """
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.lower().startswith("export "):
            line = line[len("export "):].strip()
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        yield key, value.strip().strip('"').strip("'")


def load_dotenv_like(*candidates: str) -> str | None:
    """Load the first existing .env file into ``os.environ``.

    Keys that are already set (e.g. ``PORT`` from the process manager) win.
    Returns the loaded path, or None if no file was found.
    """
    for path in _candidate_paths(candidates):
        if not path.is_file():
            continue
        try:
            text = path.read_text(encoding="utf-8")
        except OSError:
            continue
        for key, value in parse_env_lines(text):
            os.environ.setdefault(key, value)
        return str(path)
    return None
