import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import pandas as pd
import plotly.express as px
import streamlit as st

from budget.config import Config
from budget.logger import setup_logger
from budget.session import SessionController
from budget.state import ResultReady
from budget.view import ErrorView, PromptView, TableView

st.set_page_config(page_title="Budget Split", layout="centered")

if "logger_ready" not in st.session_state:
    setup_logger("budget", Config.LOG_LEVEL)
    st.session_state.logger_ready = True

logger = logging.getLogger(__name__)

if "session" not in st.session_state:
    st.session_state.session = SessionController()

session: SessionController = st.session_state.session


def submit_income():
    # The web field replaces the buffer in one go instead of keystroke by keystroke
    session.input.set_value(st.session_state.get("income", ""))
    session.submit()


def quit_session():
    session.cancel()


def start_over():
    st.session_state.session = SessionController()
    st.session_state.income = ""
    logger.debug("new web session")


view = session.view()

if session.cancelled:
    st.info("Session ended.")
    st.button("Start over", key="btn_start_over", on_click=start_over)
    st.stop()

if isinstance(view, PromptView):
    st.title(view.prompt)
    st.text_input(
        "Income",
        key="income",
        max_chars=Config.CHAR_LIMIT,
        placeholder=view.placeholder,
    )
    c1, c2 = st.columns(2)
    with c1:
        st.button("Allocate", key="btn_allocate", on_click=submit_income)
    with c2:
        st.button("Quit", key="btn_quit", on_click=quit_session)

elif isinstance(view, ErrorView):
    st.error(view.error_message)
    st.button("Start over", key="btn_start_over", on_click=start_over)

elif isinstance(view, TableView):
    st.title("Allocation")
    df = pd.DataFrame(list(view.rows), columns=list(view.columns))
    st.table(df)

    state = session.state
    if isinstance(state, ResultReady):
        fig = px.bar(
            x=[r.category.name for r in state.results],
            y=[r.amount for r in state.results],
            labels={"x": "Category", "y": "Amount (EUR)"},
            title="Income split",
            template="plotly_dark",
        )
        st.plotly_chart(fig, use_container_width=True)

    st.button("Start over", key="btn_start_over", on_click=start_over)
