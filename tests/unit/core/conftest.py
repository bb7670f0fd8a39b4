"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
#work-on-myself/blog

# Why I Write

Some *italic* and **bold** text.

## Habits

* read daily
* write daily
  * nested idea

A closing [thought](https://example.com).
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_lines")
def sample_lines_fixture():
    return SAMPLE_MD.splitlines()
