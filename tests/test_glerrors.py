from glmesh.glerrors import GLErrorCode, describe_errors, error_name


def test_standard_code_values():
    assert error_name(0x0500) == "INVALID_ENUM"
    assert error_name(0x0502) == "INVALID_OPERATION"


def test_error_name_known():
    assert error_name(GLErrorCode.OUT_OF_MEMORY) == "OUT_OF_MEMORY"
    assert error_name(int(GLErrorCode.INVALID_FRAMEBUFFER_OPERATION)) == "INVALID_FRAMEBUFFER_OPERATION"


def test_error_name_unknown_is_empty():
    assert error_name(0x1234) == ""
    assert error_name(GLErrorCode.NO_ERROR) == ""


def test_describe_single_error():
    lines = describe_errors([GLErrorCode.INVALID_OPERATION], "main.cpp", 42)
    assert lines == ["GL_INVALID_OPERATION - main.cpp:42"]


def test_describe_stops_at_no_error():
    codes = [GLErrorCode.INVALID_ENUM, GLErrorCode.NO_ERROR, GLErrorCode.INVALID_VALUE]
    lines = describe_errors(codes, "f.cpp", 7)
    assert lines == ["GL_INVALID_ENUM - f.cpp:7"]


def test_describe_unknown_code_has_empty_name():
    assert describe_errors([0x9999], "f.cpp", 1) == ["GL_ - f.cpp:1"]


def test_describe_nothing_queued():
    assert describe_errors([], "f.cpp", 1) == []
    assert describe_errors([0], "f.cpp", 1) == []


def test_describe_keeps_order():
    codes = [GLErrorCode.INVALID_VALUE, GLErrorCode.OUT_OF_MEMORY]
    lines = describe_errors(iter(codes), "x.cpp", 3)
    assert [line.split(" ")[0] for line in lines] == [f"GL_{c.name}" for c in codes]