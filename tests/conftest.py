"""Shared test fixtures: sample diffs, assets, configs."""

from __future__ import annotations

import re
import textwrap

import pytest

from diffpaint.config.resolver import get_config
from diffpaint.config.schema import Config
from diffpaint.highlighting.assets import HighlightingAssets

ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_escapes(text: str) -> str:
    return ESCAPE_RE.sub("", text)


@pytest.fixture
def assets() -> HighlightingAssets:
    return HighlightingAssets()


@pytest.fixture
def dark_config(assets: HighlightingAssets) -> Config:
    """Default dark theme, removed lines not highlighted."""
    return get_config(assets)


@pytest.fixture
def sample_diff_python() -> str:
    """A commit touching one Python file with a replacement and an addition."""
    return textwrap.dedent("""\
        commit 3f2a1c0d9e8b7a6f5e4d3c2b1a0f9e8d7c6b5a49
        Author: Test <test@test.com>
        Date:   Mon Jan 1 00:00:00 2024 +0000

            Tweak greeting

        diff --git a/hello.py b/hello.py
        index 1234567..abcdef0 100644
        --- a/hello.py
        +++ b/hello.py
        @@ -1,4 +1,5 @@
         def greet(name):
        -    return "Hi " + name
        -    # old
        +    return f"Hello, {name}!"
         # trailing context
        +print(greet("world"))
    """)


@pytest.fixture
def sample_diff_unknown_extension() -> str:
    """A diff against a file no lexer is registered for."""
    return textwrap.dedent("""\
        diff --git a/notes.zzqx b/notes.zzqx
        index 1234567..abcdef0 100644
        --- a/notes.zzqx
        +++ b/notes.zzqx
        @@ -1,2 +1,2 @@
         keep
        -old
        +new
    """)


@pytest.fixture
def sample_diff_two_files() -> str:
    """Python then Rust, so the active syntax changes mid-stream."""
    return textwrap.dedent("""\
        diff --git a/a.py b/a.py
        --- a/a.py
        +++ b/a.py
        @@ -1 +1 @@
        -x = 1
        +x = 2
        diff --git a/src/lib.rs b/src/lib.rs
        --- a/src/lib.rs
        +++ b/src/lib.rs
        @@ -1 +1 @@
        -fn a() {}
        +fn b() {}
    """)
