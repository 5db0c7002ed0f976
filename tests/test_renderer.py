import pytest

from signals_ssr import (
    ErrorKind,
    InvalidArgumentError,
    VNode,
    computed,
    filter_array,
    html,
    map_array,
    reduce_array,
    render_to_string,
    signal,
)


def test_text_marker():
    view = html(["<h1>", "</h1>"], "Hello")
    assert render_to_string(view) == "<h1><!--stext-part-0-->Hello<!--etext-part-0--></h1>"


def test_attribute_value_has_no_marker():
    view = html(['<img alt="', '" src="/x.png">'], "Logo")
    assert render_to_string(view) == '<img alt="Logo" src="/x.png">'


def test_event_attribute_placeholder():
    def handler(event):
        raise AssertionError("handlers are never called on the server")

    view = html(['<button onclick="', '">Ok</button>'], handler)
    assert render_to_string(view) == '<button onclick="ev-part-0">Ok</button>'


def test_event_attribute_ignores_value():
    view = html(['<button onclick="', '">Ok</button>'], "ignored")
    assert render_to_string(view) == '<button onclick="ev-part-0">Ok</button>'


def test_nested_view_is_embedded_without_marker():
    child = html(["<em>", "</em>"], "x")
    parent = html(["<p>", "</p>"], child)
    assert render_to_string(parent) == "<p><em><!--stext-part-0-->x<!--etext-part-0--></em></p>"


def test_list_of_views_allocates_wrapper_first():
    view = html(
        ["<ul>", "</ul>"],
        [html(["<li>", "</li>"], "a"), html(["<li>", "</li>"], "b")],
    )
    assert render_to_string(view) == (
        "<ul><!--stext-part-0-->"
        "<li><!--stext-part-1-->a<!--etext-part-1--></li>"
        "<li><!--stext-part-2-->b<!--etext-part-2--></li>"
        "<!--etext-part-0--></ul>"
    )


@pytest.mark.parametrize("value", [None, False])
def test_empty_values_keep_marker_pair(value):
    view = html(["<p>", "</p>"], value)
    assert render_to_string(view) == "<p><!--stext-part-0--><!--etext-part-0--></p>"


def test_empty_value_in_attribute():
    view = html(['<input value="', '">'], None)
    assert render_to_string(view) == '<input value="">'


def test_true_is_formatted_as_text():
    view = html(["<p>", "</p>"], True)
    assert render_to_string(view) == "<p><!--stext-part-0-->True<!--etext-part-0--></p>"


def test_multiple_attributes_in_one_tag():
    view = html(['<a href="', '" title="', '">', "</a>"], "/docs", "Docs", "Read")
    assert render_to_string(view) == (
        '<a href="/docs" title="Docs"><!--stext-part-0-->Read<!--etext-part-0--></a>'
    )


def test_unquoted_attribute_value():
    view = html(["<input value=", ">"], 3)
    assert render_to_string(view) == "<input value=3>"


def test_equals_sign_in_text_is_content():
    view = html(["<p>a=", "</p>"], 1)
    assert render_to_string(view) == "<p>a=<!--stext-part-0-->1<!--etext-part-0--></p>"


def test_attribute_named_with_on_is_treated_as_event():
    # Substring heuristic: "content" contains "on"
    view = html(['<meta name="description" content="', '">'], "A page")
    assert render_to_string(view) == '<meta name="description" content="ev-part-0">'


def test_angle_bracket_in_attribute_value_closes_the_tag():
    # Quotes are not tracked, so the later attribute reads as content
    view = html(['<a title="', '" href="', '">x</a>'], "a>b", "/u")
    assert render_to_string(view) == (
        '<a title="a>b" href="<!--stext-part-0-->/u<!--etext-part-0-->">x</a>'
    )


def test_attribute_interpolations_never_contain_markers():
    view = html(
        ['<div class="', '" id="', '" title="', '">', "</div>"],
        ["a", " ", "b"],
        signal("main"),
        lambda: "tip",
        "body",
    )
    assert render_to_string(view) == (
        '<div class="a b" id="main" title="tip"><!--stext-part-0-->body<!--etext-part-0--></div>'
    )


def test_signal_in_content_and_attribute():
    count = signal(2)
    double = computed(lambda: count() * 2)
    view = html(['<span data-count="', '">', "</span>"], count, double)
    assert render_to_string(view) == (
        '<span data-count="2"><!--stext-part-0-->4<!--etext-part-0--></span>'
    )


def test_view_is_recomputed_on_every_render():
    count = signal(1)
    view = html(["<p>", "</p>"], count)
    assert render_to_string(view) == "<p><!--stext-part-0-->1<!--etext-part-0--></p>"
    count.value = 2
    assert render_to_string(view) == "<p><!--stext-part-0-->2<!--etext-part-0--></p>"


def test_generator_renders_the_same_every_time():
    view = html(["<p>", "</p>"], (c for c in "ab"))
    assert render_to_string(view) == "<p><!--stext-part-0-->ab<!--etext-part-0--></p>"
    assert render_to_string(view) == "<p><!--stext-part-0-->ab<!--etext-part-0--></p>"


def test_mapped_signal_list():
    items = signal(["a", "b"])
    lis = map_array(items, lambda item, i, arr: html(["<li>", "</li>"], item))
    view = html(["<ul>", "</ul>"], lis)

    assert render_to_string(view) == (
        "<ul><!--stext-part-0-->"
        "<li><!--stext-part-1-->a<!--etext-part-1--></li>"
        "<li><!--stext-part-2-->b<!--etext-part-2--></li>"
        "<!--etext-part-0--></ul>"
    )

    items.value = ["c"]
    assert render_to_string(view) == (
        "<ul><!--stext-part-0--><li><!--stext-part-1-->c<!--etext-part-1--></li><!--etext-part-0--></ul>"
    )


def test_filtered_and_reduced_signal_list():
    scores = signal([3, 8, 5])
    high = filter_array(scores, lambda s, i, arr: s > 4)
    total = reduce_array(high, lambda acc, s, i, arr: acc + s, 0)
    labels = map_array(high, lambda s, i, arr: f"{i}:{s};")
    view = html(['<p data-total="', '">', "</p>"], total, labels)

    assert render_to_string(view) == (
        '<p data-total="13"><!--stext-part-0-->0:8;1:5;<!--etext-part-0--></p>'
    )


def test_ids_are_consecutive_regardless_of_nesting():
    leaf = lambda text: html(["<i>", "</i>"], text)
    view = html(
        ["<div>", '<button onclick="', '">', "</button>", "</div>"],
        html(["<section>", "", "</section>"], leaf("a"), leaf("b")),
        lambda: None,
        [leaf("c"), leaf("d")],
        "e",
    )
    out = render_to_string(view)
    ids = [int(chunk.split("-->")[0]) for chunk in out.split("<!--stext-part-")[1:]]
    assert ids == [0, 1, 3, 4, 5, 6]
    assert 'onclick="ev-part-2"' in out


def test_marker_count_matches_content_values():
    view = html(
        ["<p>", " and ", '<img alt="', '">', "</p>"],
        "one",
        "two",
        "alt",
        None,
    )
    out = render_to_string(view)
    assert out.count("<!--stext-part-") == 3
    assert out.count("<!--etext-part-") == 3


def test_vnode_is_embedded_with_setups():
    def setup(root):
        return None

    node = VNode("<b>bold</b>", [setup])
    view = html(["<p>", "</p>"], node)
    vnode = view()
    assert vnode.html == "<p><b>bold</b></p>"
    assert vnode.setups == [setup]


def test_server_render_has_no_setups():
    vnode = html(["<p>", "</p>"], "x")()
    assert vnode.setups == []


def test_single_literal_string():
    assert render_to_string(html("<hr>")) == "<hr>"


def test_literal_value_count_mismatch():
    with pytest.raises(InvalidArgumentError) as excinfo:
        html(["<p>", "</p>"], "a", "b")
    assert excinfo.value.kind is ErrorKind.INVALID_ARGUMENT
