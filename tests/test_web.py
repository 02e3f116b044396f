from pathlib import Path

from streamlit.testing.v1 import AppTest

from budget.state import InputRejected, ResultReady

APP_PATH = str(Path(__file__).resolve().parent.parent / "app" / "main.py")


def start():
    return AppTest.from_file(APP_PATH, default_timeout=30).run()


def test_page_shows_prompt():
    at = start()
    assert not at.exception
    assert at.title[0].value == "Input income?"


def test_allocate_button_shows_result():
    at = start()
    at.text_input(key="income").input("1000")
    at.button(key="btn_allocate").click().run()
    assert not at.exception

    state = at.session_state["session"].state
    assert isinstance(state, ResultReady)
    assert [r.amount for r in state.results] == [500, 250, 100, 150]
    assert at.title[0].value == "Allocation"


def test_invalid_income_shows_error():
    at = start()
    at.text_input(key="income").input("abc")
    at.button(key="btn_allocate").click().run()

    assert isinstance(at.session_state["session"].state, InputRejected)
    assert at.error[0].value == "There was an error reading your input"


def test_quit_ends_session():
    at = start()
    at.button(key="btn_quit").click().run()
    assert at.session_state["session"].cancelled
    assert at.info[0].value == "Session ended."


def test_start_over_opens_new_session():
    at = start()
    at.text_input(key="income").input("abc")
    at.button(key="btn_allocate").click().run()
    at.button(key="btn_start_over").click().run()
    assert not at.session_state["session"].finished
    assert at.title[0].value == "Input income?"
