#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared pytest fixtures for pypafr tests.

This file contains fixtures that can be reused across multiple test modules.
"""

import os
import gzip
import shutil
import logging
import tempfile
import warnings

import pytest

from pypafr.config import Config


# ============== Suppress logging ===============
class NullHandler(logging.Handler):
    def emit(self, record):
        pass


def silence_logger(logger_name):
    """Completely silence a logger by name."""
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.CRITICAL)
    logger.propagate = False
    logger.handlers = []
    logger.addHandler(NullHandler())


silence_logger("tqdm")

# Set root logger to only show errors or higher
logging.getLogger().setLevel(logging.ERROR)

warnings.filterwarnings("ignore")


def pytest_configure(config):
    """Disable logging output during testing."""
    logging.disable(logging.CRITICAL)


# ============== Configuration ===============

@pytest.fixture(autouse=True)
def reset_config():
    """Restore Config defaults after every test."""
    Config.get_instance()
    Config.SHOW_PROGRESS = False
    yield Config
    Config.reset()


# ============== PAF content ===============

def paf_line(qname="q1", qlen=100, qstart=0, qend=50, strand="+",
             tname="t1", tlen=200, tstart=0, tend=60, nmatch=40, alen=50, mapq=60,
             tags=()):
    """Build one tab-separated PAF line."""
    fields = [qname, qlen, qstart, qend, strand, tname, tlen, tstart, tend, nmatch, alen, mapq]
    fields = [str(f) for f in fields] + list(tags)
    return "\t".join(fields)


@pytest.fixture
def make_paf_line():
    """Return the PAF line builder."""
    return paf_line


@pytest.fixture
def single_line():
    """One alignment without tags."""
    return paf_line()


@pytest.fixture
def tagged_lines():
    """Three minimap2-style alignments with differing tag sets."""
    return [
        paf_line("q1", 1000, 10, 510, "+", "chr1", 5000, 100, 600, 480, 500, 60,
                 tags=["NM:i:20", "tp:A:P", "cg:Z:500M"]),
        paf_line("q1", 1000, 600, 900, "-", "chr2", 3000, 0, 300, 250, 310, 0,
                 tags=["NM:i:60", "tp:A:S"]),
        paf_line("q2", 800, 0, 800, "+", "chr1", 5000, 4000, 4800, 790, 800, 55,
                 tags=["tp:A:I", "de:f:0.0125"]),
    ]


# ============== Temporary files and directories ===============

@pytest.fixture(scope="function")
def temp_dir():
    """Create a temporary directory and clean it up after the test."""
    temp_dir = tempfile.mkdtemp(prefix="pypafr_test_")
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def write_file(temp_dir):
    """Return a helper that writes text to a file in the temporary directory."""
    def _write(name, lines):
        path = os.path.join(temp_dir, name)
        content = "\n".join(lines) + "\n" if lines else ""
        if name.endswith(".gz"):
            with gzip.open(path, "wt") as f:
                f.write(content)
        else:
            with open(path, "w") as f:
                f.write(content)
        return path
    return _write


@pytest.fixture
def tagged_paf_file(write_file, tagged_lines):
    """PAF file holding the tagged_lines alignments."""
    return write_file("tagged.paf", tagged_lines)
