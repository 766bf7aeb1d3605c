#!/usr/bin/env python3
"""
Test bracket resolution for the jump table.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from screwtape.brackets import build_jump_table, jump_array


def test_nested_pairs():
    """Innermost pair resolves first, each ']' maps to its own '['."""
    assert build_jump_table("[[]]") == {2: 1, 3: 0}


def test_sequential_pairs():
    assert build_jump_table("+[-]>[<]") == {3: 1, 7: 5}


def test_unmatched_close_is_absent():
    table = build_jump_table("]+[]]")
    assert table == {3: 2}
    assert 0 not in table
    assert 4 not in table


def test_unmatched_open_is_dropped():
    assert build_jump_table("[[+]") == {3: 1}
    assert build_jump_table("[[[") == {}


def test_no_brackets():
    assert build_jump_table("") == {}
    assert build_jump_table("hello +-.") == {}


def test_idempotent():
    program = "[+[->+<]<]]["
    assert build_jump_table(program) == build_jump_table(program)


def test_jump_array():
    program = "+[-]]"
    arr = jump_array(program, build_jump_table(program))
    assert arr.tolist() == [-1, -1, -1, 1, -1]
    assert len(jump_array("", {})) == 0
