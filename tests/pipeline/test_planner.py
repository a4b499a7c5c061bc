# topmark:header:start
#
#   project      : LicenseStamp
#   file         : test_planner.py
#   file_relpath : tests/pipeline/test_planner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the header update planner.

Covers the four detection states, anchored insertion after a prepend token,
the non-insertable skip, alternate-pair fallback with normalization to the
default pair, and idempotence of a second planning pass.
"""

from __future__ import annotations

import pytest

from licensestamp.constants import DEFAULT_HEADER_TEXT
from licensestamp.filetypes.registry import STANDARD_RULE, resolve_rule
from licensestamp.pipeline.planner import (
    find_header,
    insert_header,
    is_license_header,
    plan_update,
)
from licensestamp.pipeline.renderer import synthesize
from licensestamp.pipeline.status import HeaderState, WriteStatus
from tests.conftest import mark_pipeline

HEADER: str = DEFAULT_HEADER_TEXT


@mark_pipeline
def test_php_header_goes_after_open_tag() -> None:
    content = "<?php\necho 1;\n"
    decision = plan_update(content, resolve_rule("php"), HEADER)

    assert decision.state == HeaderState.NO_SPAN_FOUND
    assert decision.status == WriteStatus.INSERTED
    assert decision.updated == "<?php\n" + HEADER + "\n" + "echo 1;\n"


@mark_pipeline
def test_stale_license_header_is_replaced() -> None:
    content = "/* old copyright 2001 Acme All Rights Reserved */\nbody\n"
    decision = plan_update(content, STANDARD_RULE, HEADER)

    assert decision.state == HeaderState.SPAN_FOUND_DIFFERS_IS_LICENSE
    assert decision.status == WriteStatus.REPLACED
    assert decision.updated == HEADER + "\nbody\n"


@mark_pipeline
def test_unrelated_comment_is_kept_and_header_inserted() -> None:
    content = "/* unrelated TODO comment */\nbody\n"
    decision = plan_update(content, STANDARD_RULE, HEADER)

    assert decision.state == HeaderState.SPAN_FOUND_DIFFERS_NOT_LICENSE
    assert decision.status == WriteStatus.INSERTED
    assert decision.updated == HEADER + "\n" + content


@mark_pipeline
def test_non_insertable_type_is_left_alone() -> None:
    content = '{"name": "pkg"}\n'
    decision = plan_update(content, resolve_rule("json"), HEADER)

    assert decision.state == HeaderState.NO_SPAN_FOUND
    assert decision.status == WriteStatus.SKIPPED
    assert decision.updated == content
    assert not decision.changed
    assert decision.reason is not None and "json" in decision.reason


@mark_pipeline
def test_non_insertable_type_still_gets_replacement() -> None:
    content = "/* Copyright 1999. All rights reserved. */\n{}\n"
    decision = plan_update(content, resolve_rule("json"), HEADER)

    assert decision.status == WriteStatus.REPLACED
    assert decision.updated == HEADER + "\n{}\n"


@mark_pipeline
def test_short_hbs_header_is_normalized_to_long_form() -> None:
    rule = resolve_rule("hbs")
    content = "{{! Copyright 2010 Acme. All rights reserved. }}\n<div></div>\n"
    decision = plan_update(content, rule, HEADER)

    assert decision.state == HeaderState.SPAN_FOUND_DIFFERS_IS_LICENSE
    assert decision.matched_pair == rule.alternate_pairs[0]
    assert decision.updated == "{{!--\n" + HEADER + "\n--}}\n<div></div>\n"


@mark_pipeline
def test_up_to_date_header_is_a_no_op() -> None:
    rule = resolve_rule("html")
    content = synthesize(HEADER, rule.default_pair) + "\n<p>hi</p>\n"
    decision = plan_update(content, rule, HEADER)

    assert decision.state == HeaderState.SPAN_FOUND_MATCHES
    assert decision.status == WriteStatus.UNCHANGED
    assert not decision.changed


@mark_pipeline
@pytest.mark.parametrize(
    "type_id,content",
    [
        ("php", "<?php\necho 1;\n"),
        ("php", "<?php\n/* TODO: refactor */\necho 1;\n"),
        ("standard", "/* unrelated */\nint main() {}\n"),
        ("standard", "/* (c) Acme, ALL RIGHTS RESERVED */\nint x;\n"),
        ("html", "<!-- nav -->\n<nav></nav>\n"),
        ("hbs", "{{! Old. All rights reserved. }}\n{{title}}\n"),
        ("tpl", ""),
    ],
)
def test_second_pass_is_up_to_date(type_id: str, content: str) -> None:
    rule = resolve_rule(type_id)
    first = plan_update(content, rule, HEADER)
    second = plan_update(first.updated, rule, HEADER)

    assert first.changed
    assert second.state == HeaderState.SPAN_FOUND_MATCHES
    assert second.updated == first.updated


@mark_pipeline
def test_replacement_applies_to_every_occurrence() -> None:
    old = "/* Old. All rights reserved. */"
    content = f"{old}\nint x;\n{old}\n"
    decision = plan_update(content, STANDARD_RULE, HEADER)

    assert decision.updated == f"{HEADER}\nint x;\n{HEADER}\n"


@mark_pipeline
def test_missing_prepend_token_falls_back_to_file_start() -> None:
    content = "echo 1;\n"
    decision = plan_update(content, resolve_rule("php"), HEADER)

    assert decision.status == WriteStatus.INSERTED
    assert decision.updated == HEADER + "\n" + content


@mark_pipeline
def test_prepend_token_anchors_on_first_occurrence_only() -> None:
    content = "<?php\necho '<?php';\n"
    updated = insert_header(content, "/* H */", resolve_rule("php"))
    assert updated == "<?php\n/* H */\necho '<?php';\n"


@mark_pipeline
def test_custom_marker_changes_classification() -> None:
    content = "/* Licensed under the Acme License */\nint x;\n"
    default = plan_update(content, STANDARD_RULE, HEADER)
    custom = plan_update(content, STANDARD_RULE, HEADER, marker="licensed under")

    assert default.state == HeaderState.SPAN_FOUND_DIFFERS_NOT_LICENSE
    assert custom.state == HeaderState.SPAN_FOUND_DIFFERS_IS_LICENSE


def test_is_license_header_is_case_insensitive() -> None:
    assert is_license_header("/* ALL RIGHTS RESERVED */")
    assert is_license_header("/* All Rights Reserved */")
    assert not is_license_header("/* rights are reserved */")


def test_find_header_tries_default_pair_first() -> None:
    rule = resolve_rule("hbs")
    found = find_header("{{!-- long --}}", rule)
    assert found is not None
    assert found[1] == rule.default_pair
    assert find_header("<div></div>", rule) is None
