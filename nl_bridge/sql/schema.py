from __future__ import annotations

from pathlib import Path
from typing import Union


def load_schema_text(path: Union[str, Path]) -> str:
    """
    Read the table/column summary used in the SQL prompt.

    The file is written by another process; its format is free text and is
    passed to the model unchanged. Relative paths resolve against the cwd.
    """
    return Path(path).read_text(encoding="utf-8")
