# Text input prompt tests: placeholder, defaults, required input and editing keys.

from conftest import typed

from termprompt import Input
from termprompt.keys import Char, Key
from termprompt.state import Active, Cancel, Error, Submit


def test_required_by_default():
    prompt = Input("Name")
    assert prompt.handle(Key.ENTER) == Error("Input required")
    prompt.handle(Char("a"))
    assert prompt.handle(Key.ENTER) == Submit("a")


def test_optional_accepts_empty_and_skips_validator():
    prompt = Input("Name").required(False).validate(lambda text: "never")
    assert prompt.handle(Key.ENTER) == Submit("")


def test_default_input_is_prefilled():
    prompt = Input("Name").default_input("demo")
    prompt.handle(Char("s"))
    assert prompt.handle(Key.ENTER) == Submit("demos")


def test_validator_receives_text():
    prompt = Input("Port").validate(lambda text: None if text.isdigit() else "not a number")
    for event in typed("80a"):
        prompt.handle(event)
    assert prompt.handle(Key.ENTER) == Error("not a number")
    prompt.handle(Key.BACKSPACE)
    assert prompt.handle(Key.ENTER) == Submit("80")


def test_validator_may_raise_value_error():
    def positive(text):
        if int(text) <= 0:
            raise ValueError("must be positive")

    prompt = Input("Count").validate(positive)
    for event in typed("-1"):
        prompt.handle(event)
    assert prompt.handle(Key.ENTER) == Error("must be positive")


def test_editing_keys():
    prompt = Input("Name")
    for event in typed("hello world"):
        prompt.handle(event)
    prompt.handle(Key.DELETE_WORD)
    prompt.handle(Key.HOME)
    prompt.handle(Key.DELETE)
    prompt.handle(Char("J"))
    prompt.handle(Key.END)
    prompt.handle(Key.LEFT)
    prompt.handle(Key.BACKSPACE)
    assert prompt.handle(Key.ENTER) == Submit("Jell ")


def test_render_placeholder_while_empty():
    prompt = Input("Name").placeholder("my-app")
    assert prompt.render(Active()) == "◆  Name\n│  my-app\n└\n"
    assert prompt.render(Cancel()) == "■  Name\n│  \n└  Operation cancelled.\n"


def test_render_input_replaces_placeholder():
    prompt = Input("Name").placeholder("my-app")
    prompt.handle(Char("x"))
    assert prompt.render(Active()) == "◆  Name\n│  x \n└\n"
    assert prompt.render(Submit("x")) == "◇  Name\n│  x\n│\n"


def test_render_error_shows_message_in_footer():
    prompt = Input("Name")
    state = prompt.handle(Key.ENTER)
    assert prompt.render(state) == "▲  Name\n│   \n└  Input required\n"


def test_interact_returns_text(session):
    fake = session(typed("demo") + [Key.ENTER])
    assert Input("Name").interact(fake) == "demo"
    assert fake.frames[-1] == "◇  Name\n│  demo\n│\n"
