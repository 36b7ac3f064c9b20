import pytest

from containerkit.modulegen.example import Example, InvalidExampleError

RULE = "Only alphanumerical characters are allowed (leading character must be a letter)"


@pytest.mark.parametrize(
    "example, container_name, entrypoint, title",
    [
        (
            Example(name="mongoDB", is_module=True, image="mongodb:latest", title_name="MongoDB"),
            "MongoDBContainer",
            "RunContainer",
            "MongoDB",
        ),
        (
            Example(name="mongoDB", is_module=True, image="mongodb:latest"),
            "MongodbContainer",
            "RunContainer",
            "Mongodb",
        ),
        (
            Example(name="mongoDB", is_module=False, image="mongodb:latest", title_name="MongoDB"),
            "mongoDBContainer",
            "runContainer",
            "MongoDB",
        ),
        (
            Example(name="mongoDB", is_module=False, image="mongodb:latest"),
            "mongodbContainer",
            "runContainer",
            "Mongodb",
        ),
    ],
)
def test_example_names(example, container_name, entrypoint, title):
    assert example.lower() == "mongodb"
    assert example.title() == title
    assert example.container_name() == container_name
    assert example.entrypoint() == entrypoint


def test_parent_dir_and_type():
    module = Example(name="foo", is_module=True)
    example = Example(name="foo")
    assert (module.parent_dir(), module.type()) == ("modules", "module")
    assert (example.parent_dir(), example.type()) == ("examples", "example")


@pytest.mark.parametrize(
    "name, title",
    [
        ("AmazingDB", "AmazingDB"),
        ("AmazingDB4tw", "AmazingDB"),
        ("AmazingDB", "AmazingDB4tw"),
    ],
)
def test_validate_accepts(name, title):
    example = Example(name=name, title_name=title)
    assert example.validate() is None
    assert example.title() == title


@pytest.mark.parametrize(
    "name, title, message",
    [
        ("Amazing DB 4 The Win", "AmazingDB", f"invalid name: Amazing DB 4 The Win. {RULE}"),
        ("AmazingDB", "Amazing DB 4 The Win", f"invalid title: Amazing DB 4 The Win. {RULE}"),
        ("1AmazingDB", "AmazingDB", f"invalid name: 1AmazingDB. {RULE}"),
        ("AmazingDB", "1AmazingDB", f"invalid title: 1AmazingDB. {RULE}"),
    ],
)
def test_validate_rejects(name, title, message):
    with pytest.raises(InvalidExampleError) as info:
        Example(name=name, title_name=title).validate()
    assert str(info.value) == message


@pytest.mark.parametrize(
    "name",
    [" foo", "foo ", "foo bar", "foo-bar", "foo/bar", "foo\\bar", "1foo", "foo1", "-foo", "foo-"],
)
def test_wrong_example_name(name):
    example = Example(
        name=name, image="docker.io/example/" + name + ":latest", tc_version="v0.0.0-test"
    )
    with pytest.raises(InvalidExampleError):
        example.validate()


@pytest.mark.parametrize(
    "title",
    [" fooDB", "fooDB ", "foo barDB", "foo-barDB", "foo/barDB", "foo\\barDB", "1fooDB", "-fooDB", "foo-DB"],
)
def test_wrong_example_title(title):
    example = Example(
        name="foo", title_name=title, image="docker.io/example/foo:latest", tc_version="v0.0.0-test"
    )
    with pytest.raises(InvalidExampleError, match="invalid title"):
        example.validate()


def test_empty_title_is_rejected():
    with pytest.raises(InvalidExampleError, match="invalid title: \\. "):
        Example(name="foo").validate()