# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import pytest
from pytest import param

from benchdash.common.utils import as_number, index_by, is_hashable, lookup, missing_last


class TestAsNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            param(16, 16.0, id="int"),
            param(2.5, 2.5, id="float"),
            param("16", 16.0, id="numeric-string"),
            param(" 1e3 ", 1000.0, id="exponent-string"),
            param(None, None, id="none"),
            param(True, None, id="bool"),
            param("lots", None, id="text"),
            param([16], None, id="list"),
            param({"n": 1}, None, id="object"),
            param(float("nan"), None, id="nan"),
            param("inf", None, id="infinite-string"),
        ],
    )
    def test_values(self, value, expected) -> None:
        assert as_number(value) == expected


class TestMissingLast:
    def test_ascending_mixed_values(self) -> None:
        values = [64, None, "16", "lots", 4, [1]]

        assert sorted(values, key=missing_last)[:3] == [4, "16", 64]

    def test_descending_keeps_missing_last(self) -> None:
        values = [None, 1.5, "x", 9]

        assert sorted(values, key=lambda v: missing_last(v, descending=True)) == [
            9,
            1.5,
            None,
            "x",
        ]


class TestIndexing:
    def test_is_hashable(self) -> None:
        assert is_hashable("a")
        assert is_hashable(7)
        assert not is_hashable(["a"])
        assert not is_hashable({"a": 1})

    def test_index_by_skips_unusable_records(self) -> None:
        records = [
            {"id": "a", "n": 1},
            {"id": ["b"], "n": 2},
            "not-a-record",
            {"n": 3},
            {"id": "a", "n": 4},
        ]

        index = index_by(records, "id")

        assert index == {"a": {"id": "a", "n": 4}, None: {"n": 3}}

    @pytest.mark.parametrize(
        "key, expected",
        [
            param("a", 1, id="present"),
            param("z", None, id="absent"),
            param(["a"], None, id="list-key"),
            param({"a": 1}, None, id="object-key"),
        ],
    )
    def test_lookup(self, key, expected) -> None:
        assert lookup({"a": 1}, key) == expected
