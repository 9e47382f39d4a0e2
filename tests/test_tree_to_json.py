"""Tests for the incremental XML -> JSON rendering."""

import io
import json

from evtx_export.tree_to_json import Container, Leaf, classify, render
from evtx_export.xml_tree import parse_xml

from conftest import SAMPLE_EVENT


def render_text(xml: str) -> str:
    out = io.StringIO()
    out.write("{")
    render(parse_xml(xml), out)
    out.write("}")
    return out.getvalue()


def test_nested_containers_and_leaves():
    xml = "<Event><System><EventID>4624</EventID><Channel>Security</Channel></System></Event>"
    assert render_text(xml) == '{"System":{"EventID":"4624","Channel":"Security"}}'


def test_root_tag_is_not_rendered():
    assert render_text("<Event><A>1</A></Event>") == '{"A":"1"}'


def test_empty_leaf_renders_empty_string():
    assert render_text("<Event><A/><B></B></Event>") == '{"A":"","B":""}'


def test_namespaced_tags_render_by_local_name():
    out = render_text(SAMPLE_EVENT)
    assert out.startswith('{"System":{"Provider":"","EventID":"4624"')
    assert '"EventData":{"Data":"alice"}' in out
    assert "schemas.microsoft.com" not in out


def test_sample_event_is_valid_json():
    data = json.loads(render_text(SAMPLE_EVENT))
    assert data["System"]["Computer"] == "host01"
    assert data["System"]["Level"] == "0"


def test_values_are_never_coerced():
    data = json.loads(render_text("<E><N>42</N><B>true</B><F>1.5</F></E>"))
    assert data == {"N": "42", "B": "true", "F": "1.5"}


def test_comments_and_processing_instructions_are_skipped():
    xml = "<E><!-- note --><A>1</A><?pi data?><B>2</B></E>"
    assert render_text(xml) == '{"A":"1","B":"2"}'


def test_duplicate_tags_are_written_as_repeated_keys():
    xml = "<E><Data>a</Data><Data>b</Data></E>"
    assert render_text(xml) == '{"Data":"a","Data":"b"}'


def test_first_child_text_makes_node_a_leaf():
    # Later element children are folded into the text, not rendered as keys.
    xml = "<E><M>lead<X>1</X><Y>2</Y></M></E>"
    assert render_text(xml) == '{"M":"lead12"}'


def test_first_child_comment_makes_node_a_leaf():
    xml = "<E><M><!-- c --><X>1</X></M></E>"
    assert render_text(xml) == '{"M":"1"}'


def test_comment_text_is_not_leaf_content():
    assert render_text("<E><M>a<!-- secret -->b</M></E>") == '{"M":"ab"}'


def test_first_child_processing_instruction_makes_node_a_leaf():
    xml = "<E><M><?pi data?><X>1</X></M></E>"
    assert render_text(xml) == '{"M":"1"}'


def test_nested_comments_are_not_leaf_content():
    xml = "<E><M>a<X>1<!-- c -->2</X><?pi d?>b</M></E>"
    assert render_text(xml) == '{"M":"a12b"}'


def test_whitespace_before_first_element_makes_node_a_leaf():
    xml = "<E><M>\n  <X>1</X>\n</M></E>"
    assert render_text(xml) == '{"M":"\n  1\n"}'


def test_element_first_with_trailing_text_is_a_container():
    # Mixed content after the first element is dropped at this level.
    xml = "<E><M><X>1</X>tail<Y>2</Y></M></E>"
    assert render_text(xml) == '{"M":{"X":"1","Y":"2"}}'


def test_values_are_not_escaped():
    xml = '<E><Q>say "hi"</Q><S>C:\\temp</S></E>'
    assert render_text(xml) == '{"Q":"say "hi"","S":"C:\\temp"}'


def test_rendering_twice_is_identical():
    root = parse_xml(SAMPLE_EVENT)
    first, second = io.StringIO(), io.StringIO()
    render(root, first)
    render(root, second)
    assert first.getvalue() == second.getvalue()


def test_classify():
    root = parse_xml("<E><C><X>1</X></C><L>text</L><Z/></E>")
    c, l, z = list(root.element_children())
    assert isinstance(classify(c), Container)
    assert classify(l) == Leaf("text")
    assert classify(z) == Leaf("")
