"""Tests for domain/action_parser.py — pure Python, no model dependency."""

import pytest

from cobrowse.domain.action_parser import (
    TAG_VALIDATORS,
    count_dropped,
    parse_actions,
    scan_tags,
    strip_actions,
)
from cobrowse.domain.models import Action


class TestScanTags:
    def test_single_tag(self):
        tags = scan_tags("Sure! [ACTION:scroll_to_section:projects] Here you go.")
        assert len(tags) == 1
        assert tags[0].name == "scroll_to_section"
        assert tags[0].payload == "projects"

    def test_spans_cover_brackets(self):
        text = "a [ACTION:scroll_page:down] b"
        tag = scan_tags(text)[0]
        assert text[tag.start:tag.end] == "[ACTION:scroll_page:down]"

    def test_json_payload_with_bracket_inside_string(self):
        text = '[ACTION:fill_input:{"field":"message","value":"see [1]"}] done'
        tags = scan_tags(text)
        assert len(tags) == 1
        assert tags[0].payload == '{"field":"message","value":"see [1]"}'

    def test_unclosed_tag_is_ignored(self):
        assert scan_tags("oops [ACTION:scroll_page:down") == []

    def test_unclosed_tag_does_not_swallow_next(self):
        tags = scan_tags("Going [ACTION:scroll_page:down now. [ACTION:scroll_to_section:contact]")
        assert [(t.name, t.payload) for t in tags] == [("scroll_to_section", "contact")]

    def test_tag_prefix_inside_json_string_kept(self):
        text = '[ACTION:fill_input:{"field":"message","value":"use [ACTION:x"}]'
        tags = scan_tags(text)
        assert len(tags) == 1
        assert tags[0].payload == '{"field":"message","value":"use [ACTION:x"}'

    def test_empty_tag_is_ignored(self):
        assert scan_tags("[ACTION:] hi") == []

    def test_no_tags(self):
        assert scan_tags("just plain text") == []


class TestParseActions:
    def test_scroll_to_section(self):
        actions = parse_actions("Let me show you. [ACTION:scroll_to_section:projects]")
        assert actions == [Action(type="scroll_to_section", data={"sectionId": "projects"})]

    def test_section_is_lowercased(self):
        actions = parse_actions("[ACTION:scroll_to_section:Contact]")
        assert actions[0].data == {"sectionId": "contact"}

    def test_unknown_section_dropped(self):
        assert parse_actions("[ACTION:scroll_to_section:unknown_id]") == []

    def test_scroll_page(self):
        actions = parse_actions("[ACTION:scroll_page:TOP]")
        assert actions == [Action(type="scroll_page", data={"direction": "top"})]

    def test_bad_direction_dropped(self):
        assert parse_actions("[ACTION:scroll_page:sideways]") == []

    def test_fill_field_normalized(self):
        actions = parse_actions('[ACTION:fill_input:{"field":"NAME","value":"Bob"}]')
        assert actions == [Action(type="fill_input", data={"field": "name", "value": "Bob"})]

    def test_fill_value_defaults_to_empty(self):
        actions = parse_actions('[ACTION:fill_input:{"field":"email"}]')
        assert actions[0].data == {"field": "email", "value": ""}

    def test_fill_unknown_field_dropped(self):
        assert parse_actions('[ACTION:fill_input:{"field":"phone","value":"123"}]') == []

    def test_fill_selector_bypasses_allow_list(self):
        actions = parse_actions('[ACTION:fill_input:{"selector":"#phone","value":"123"}]')
        assert actions == [Action(type="fill_input", data={"selector": "#phone", "value": "123"})]

    def test_selector_wins_over_field(self):
        actions = parse_actions(
            '[ACTION:fill_input:{"selector":"#custom","field":"name","value":"x"}]'
        )
        assert actions[0].data == {"selector": "#custom", "value": "x"}

    def test_malformed_json_skipped_scan_continues(self):
        text = (
            '[ACTION:fill_input:{"field":"name",]'
            ' [ACTION:fill_input:{"field":"email","value":"a@b.co"}]'
        )
        actions = parse_actions(text)
        assert actions == [Action(type="fill_input", data={"field": "email", "value": "a@b.co"})]

    def test_non_object_json_dropped(self):
        assert parse_actions('[ACTION:fill_input:["name","Bob"]]') == []

    @pytest.mark.parametrize(
        "text",
        [
            "Going [ACTION:scroll_page:down now. [ACTION:scroll_to_section:contact]",
            '[ACTION:fill_input:{"field":"name","value":"Bob" [ACTION:scroll_to_section:contact]',
        ],
    )
    def test_broken_tag_keeps_following_tag(self, text):
        assert parse_actions(text) == [
            Action(type="scroll_to_section", data={"sectionId": "contact"})
        ]

    @pytest.mark.parametrize(
        "raw, expected",
        [("true", "true"), ("42", "42"), ("1.5", "1.5"), ('["a"]', '["a"]'), ("null", "")],
    )
    def test_non_string_value_as_json_text(self, raw, expected):
        actions = parse_actions('[ACTION:fill_input:{"field":"message","value":%s}]' % raw)
        assert actions == [Action(type="fill_input", data={"field": "message", "value": expected})]

    def test_tag_name_is_case_sensitive(self):
        assert parse_actions("[ACTION:SCROLL_TO_SECTION:about]") == []

    def test_fixed_type_order_beats_text_position(self):
        text = (
            '[ACTION:fill_input:{"field":"name","value":"A"}] '
            "[ACTION:scroll_page:down] "
            "[ACTION:scroll_to_section:contact] "
            "[ACTION:scroll_to_section:about]"
        )
        types = [a.type for a in parse_actions(text)]
        assert types == ["scroll_to_section", "scroll_to_section", "scroll_page", "fill_input"]

    def test_same_type_keeps_text_order(self):
        text = "[ACTION:scroll_to_section:contact] [ACTION:scroll_to_section:about]"
        ids = [a.data["sectionId"] for a in parse_actions(text)]
        assert ids == ["contact", "about"]

    def test_no_actions(self):
        assert parse_actions("just plain text") == []

    def test_none_text(self):
        assert parse_actions(None) == []


class TestStripActions:
    def test_strips_all(self):
        text = "hello [ACTION:scroll_page:down] world"
        assert strip_actions(text) == "hello  world"

    def test_strips_rejected_tags_too(self):
        assert strip_actions("Go [ACTION:scroll_to_section:unknown_id]") == "Go"

    def test_strips_unknown_tag_names(self):
        assert strip_actions("[ACTION:highlight:Project X] Look here") == "Look here"

    def test_strips_json_payload_fully(self):
        text = 'Filling it. [ACTION:fill_input:{"field":"message","value":"a] b"}]'
        assert strip_actions(text) == "Filling it."

    def test_broken_tag_left_in_text(self):
        text = "Going [ACTION:scroll_page:down now. [ACTION:scroll_to_section:contact]"
        assert strip_actions(text) == "Going [ACTION:scroll_page:down now."

    def test_no_actions(self):
        assert strip_actions("just text") == "just text"

    def test_empty_after_strip(self):
        assert strip_actions("[ACTION:scroll_page:up]") == ""


class TestCountDropped:
    def test_counts_rejected(self):
        text = "[ACTION:scroll_page:up] [ACTION:scroll_page:left] [ACTION:click:Send]"
        assert count_dropped(text, parse_actions(text)) == 2


class TestValidators:
    def test_scan_order(self):
        assert list(TAG_VALIDATORS) == ["scroll_to_section", "scroll_page", "fill_input"]
