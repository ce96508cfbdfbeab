import pytest

from glmesh.shader import ShaderSources, load_shader_sources, read_shader_source


def test_lines_are_prefixed_with_newline(tmp_path):
    path = tmp_path / "a.vertexshader"
    path.write_text("#version 330 core\nvoid main(){}\n", encoding="utf-8")
    assert read_shader_source(path) == "\n#version 330 core\nvoid main(){}"


def test_no_trailing_newline(tmp_path):
    path = tmp_path / "b.glsl"
    path.write_text("x\ny", encoding="utf-8")
    assert read_shader_source(path) == "\nx\ny"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.glsl"
    path.write_text("", encoding="utf-8")
    assert read_shader_source(path) == ""


def test_blank_lines_kept(tmp_path):
    path = tmp_path / "c.glsl"
    path.write_text("a\n\nb\n", encoding="utf-8")
    assert read_shader_source(path) == "\na\n\nb"


def test_missing_vertex_shader_raises(tmp_path):
    fragment = tmp_path / "f.glsl"
    fragment.write_text("f\n", encoding="utf-8")
    with pytest.raises(FileNotFoundError):
        load_shader_sources(tmp_path / "missing.glsl", fragment)


def test_missing_fragment_shader_is_empty(tmp_path):
    vertex = tmp_path / "v.glsl"
    vertex.write_text("v\n", encoding="utf-8")
    sources = load_shader_sources(vertex, tmp_path / "missing.glsl")
    assert sources == ShaderSources(vertex="\nv", fragment="")


def test_both_shaders_read(tmp_path):
    vertex = tmp_path / "v.glsl"
    fragment = tmp_path / "f.glsl"
    vertex.write_text("vert\n", encoding="utf-8")
    fragment.write_text("frag\n", encoding="utf-8")
    sources = load_shader_sources(vertex, fragment)
    assert sources.vertex == read_shader_source(vertex)
    assert sources.fragment == read_shader_source(fragment)