"""Tests for the plaintext, MermaidJS and GraphViz renderers."""

import io

import pytest

from tangled import (
    DependencyGraph,
    GraphvizRenderer,
    MermaidRenderer,
    OutputFormat,
    PlaintextRenderer,
    get_renderer,
    parse_graph,
)
from tangled._render import HtmlRenderer, sanitize_node_id

EXAMPLE_INPUT = """github.com/example/main github.com/dep1@v1.0.0
github.com/example/main github.com/dep2@v2.0.0
github.com/dep1@v1.0.0 github.com/subdep@v1.0.0"""


@pytest.fixture
def graph() -> DependencyGraph:
    return parse_graph(EXAMPLE_INPUT)


def render_to_string(renderer, graph: DependencyGraph) -> str:
    buf = io.StringIO()
    renderer.render(graph, buf)
    return buf.getvalue()


class FailingWriter:
    """A sink whose writes always fail."""

    def write(self, _text: str) -> int:
        msg = "No space left on device"
        raise OSError(msg)


class TestPlaintextRenderer:
    def test_example_tree(self, graph: DependencyGraph) -> None:
        output = render_to_string(PlaintextRenderer(), graph)
        assert output == (
            "github.com/example/main\n"
            "  ├── github.com/dep1@v1.0.0\n"
            "  │   └── github.com/subdep@v1.0.0\n"
            "  └── github.com/dep2@v2.0.0\n"
        )

    def test_root_has_no_connector(self, graph: DependencyGraph) -> None:
        first_line = render_to_string(PlaintextRenderer(), graph).splitlines()[0]
        assert first_line == "github.com/example/main"

    def test_subdependency_nested_deeper(self, graph: DependencyGraph) -> None:
        lines = render_to_string(PlaintextRenderer(), graph).splitlines()
        dep1_line = next(line for line in lines if line.endswith("github.com/dep1@v1.0.0"))
        subdep_line = next(line for line in lines if line.endswith("github.com/subdep@v1.0.0"))
        assert subdep_line.index("github.com") == dep1_line.index("github.com") + 4

    def test_siblings_sorted(self) -> None:
        graph = parse_graph("app z@v1\napp a@v1\napp m@v1")
        lines = render_to_string(PlaintextRenderer(), graph).splitlines()
        assert lines[1:] == ["  ├── a@v1", "  ├── m@v1", "  └── z@v1"]

    def test_cycle_is_not_expanded_twice(self) -> None:
        graph = parse_graph("app lib@v1\nlib@v1 app")
        output = render_to_string(PlaintextRenderer(), graph)
        assert output == "app\n  └── lib@v1\n      └── app\n"

    def test_shared_dependency_shown_but_not_expanded(self) -> None:
        graph = parse_graph("app a@v1\napp b@v1\na@v1 shared@v1\nb@v1 shared@v1\nshared@v1 leaf@v1")
        lines = render_to_string(PlaintextRenderer(), graph).splitlines()
        assert lines == [
            "app",
            "  ├── a@v1",
            "  │   └── shared@v1",
            "  │       └── leaf@v1",
            "  └── b@v1",
            "      └── shared@v1",
        ]

    def test_self_loop(self) -> None:
        graph = parse_graph("app app")
        assert render_to_string(PlaintextRenderer(), graph) == "app\n  └── app\n"

    def test_deep_chain(self) -> None:
        depth = 1500
        text = "\n".join(f"m{i}@v1 m{i + 1}@v1" for i in range(depth))
        graph = parse_graph(text)
        lines = render_to_string(PlaintextRenderer(), graph).splitlines()
        assert len(lines) == depth + 1
        assert lines[-1].endswith(f"└── m{depth}@v1")

    def test_reusable_across_renders(self, graph: DependencyGraph) -> None:
        renderer = PlaintextRenderer()
        assert render_to_string(renderer, graph) == render_to_string(renderer, graph)

    def test_write_error_propagates(self, graph: DependencyGraph) -> None:
        with pytest.raises(OSError, match="No space left"):
            PlaintextRenderer().render(graph, FailingWriter())


class TestMermaidRenderer:
    def test_example_flowchart(self, graph: DependencyGraph) -> None:
        output = render_to_string(MermaidRenderer(), graph)
        assert output == (
            "graph TD\n"
            '    N1["github.com/dep1@v1.0.0"]\n'
            '    N2["github.com/dep2@v2.0.0"]\n'
            '    N3["github.com/example/main"]\n'
            '    N4["github.com/subdep@v1.0.0"]\n'
            "    N3 --> N1\n"
            "    N3 --> N2\n"
            "    N1 --> N4\n"
        )

    def test_deterministic(self, graph: DependencyGraph) -> None:
        assert render_to_string(MermaidRenderer(), graph) == render_to_string(MermaidRenderer(), graph)

    def test_one_arrow_per_edge(self) -> None:
        graph = parse_graph("app a@v1\napp a@v1\na@v1 b@v1")
        output = render_to_string(MermaidRenderer(), graph)
        assert output.count("-->") == 3

    def test_quotes_escaped(self) -> None:
        graph = parse_graph('app we"ird@v1')
        output = render_to_string(MermaidRenderer(), graph)
        assert '["we\\"ird@v1"]' in output

    def test_write_error_propagates(self, graph: DependencyGraph) -> None:
        with pytest.raises(OSError, match="No space left"):
            MermaidRenderer().render(graph, FailingWriter())


class TestGraphvizRenderer:
    def test_example_digraph(self, graph: DependencyGraph) -> None:
        output = render_to_string(GraphvizRenderer(), graph)
        assert output == (
            "digraph dependencies {\n"
            "    rankdir=LR;\n"
            "    node [shape=box, style=rounded];\n"
            '    "github_com_dep1_v1_0_0" [label="github.com/dep1@v1.0.0"];\n'
            '    "github_com_dep2_v2_0_0" [label="github.com/dep2@v2.0.0"];\n'
            '    "github_com_example_main" [label="github.com/example/main", fillcolor=lightblue, style="rounded,filled"];\n'
            '    "github_com_subdep_v1_0_0" [label="github.com/subdep@v1.0.0"];\n'
            '    "github_com_example_main" -> "github_com_dep1_v1_0_0";\n'
            '    "github_com_example_main" -> "github_com_dep2_v2_0_0";\n'
            '    "github_com_dep1_v1_0_0" -> "github_com_subdep_v1_0_0";\n'
            "}\n"
        )

    def test_sanitized_node_id(self) -> None:
        graph = parse_graph("github.com/example/app github.com/example/module@v1.2.3")
        output = render_to_string(GraphvizRenderer(), graph)
        assert '"github_com_example_module_v1_2_3" [label="github.com/example/module@v1.2.3"];' in output

    def test_sanitize_replaces_dashes(self) -> None:
        assert sanitize_node_id("golang.org/x/go-cmp@v0.6.0") == "golang_org_x_go_cmp_v0_6_0"

    def test_only_root_is_highlighted(self, graph: DependencyGraph) -> None:
        output = render_to_string(GraphvizRenderer(), graph)
        assert output.count("fillcolor=lightblue") == 1

    def test_label_escaping(self) -> None:
        graph = parse_graph('app we"ird\\mod@v1')
        output = render_to_string(GraphvizRenderer(), graph)
        assert '[label="we\\"ird\\\\mod@v1"]' in output

    def test_ends_with_closing_brace(self, graph: DependencyGraph) -> None:
        assert render_to_string(GraphvizRenderer(), graph).endswith("}\n")

    def test_write_error_propagates(self, graph: DependencyGraph) -> None:
        with pytest.raises(OSError, match="No space left"):
            GraphvizRenderer().render(graph, FailingWriter())


class TestOutputFormat:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("text", OutputFormat.TEXT),
            ("plaintext", OutputFormat.TEXT),
            ("tree", OutputFormat.TEXT),
            ("html", OutputFormat.HTML),
            ("d3", OutputFormat.HTML),
            ("mermaid", OutputFormat.MERMAID),
            ("mmd", OutputFormat.MERMAID),
            ("dot", OutputFormat.DOT),
            ("graphviz", OutputFormat.DOT),
            ("GraphViz", OutputFormat.DOT),
            ("HTML", OutputFormat.HTML),
        ],
    )
    def test_parse(self, name: str, expected: OutputFormat) -> None:
        assert OutputFormat.parse(name) is expected

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match=r"unsupported output format: svg \(supported: text, html, mermaid, dot\)"):
            OutputFormat.parse("svg")

    def test_is_str(self) -> None:
        assert OutputFormat.DOT == "dot"
        assert f"{OutputFormat.MERMAID}" == "mermaid"

    def test_members_have_descriptions(self) -> None:
        assert OutputFormat.TEXT.__doc__ == "Indented plaintext tree"
        assert all(member.__doc__ for member in OutputFormat)


class TestGetRenderer:
    @pytest.mark.parametrize(
        ("name", "renderer_type"),
        [
            ("text", PlaintextRenderer),
            ("html", HtmlRenderer),
            ("mermaid", MermaidRenderer),
            ("dot", GraphvizRenderer),
            (OutputFormat.DOT, GraphvizRenderer),
            ("tree", PlaintextRenderer),
        ],
    )
    def test_returns_renderer(self, name: str, renderer_type: type) -> None:
        assert isinstance(get_renderer(name), renderer_type)

    def test_title_passed_to_html(self) -> None:
        renderer = get_renderer(OutputFormat.HTML, title="deps.graph")
        assert isinstance(renderer, HtmlRenderer)
        assert renderer.page_title == "deps.graph - Dependency Graph"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="unsupported output format"):
            get_renderer("png")

    def test_fresh_instance_each_call(self) -> None:
        assert get_renderer("text") is not get_renderer("text")
