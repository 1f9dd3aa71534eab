# Role: Streamlit chat UI.
# - Backend is authoritative (chat turns, widgets).
# - Quiz and coding-challenge widgets turn their completion events into new user messages.

from __future__ import annotations

from typing import Optional

import streamlit as st

from tutor_backend.models.widget import ChallengeData, QuizData
from tutor_ui.api_client import ChatApiClient
from tutor_ui.coding_challenge import ChallengeEditor
from tutor_ui.conversation import Conversation
from tutor_ui.quiz import QuizSession, build_quiz_report


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "client" not in st.session_state:
        st.session_state["client"] = ChatApiClient()
    if "conversation" not in st.session_state:
        st.session_state["conversation"] = Conversation(st.session_state["client"])
    if "quizzes" not in st.session_state:
        st.session_state["quizzes"] = {}
    if "editors" not in st.session_state:
        st.session_state["editors"] = {}
    if "pending_message" not in st.session_state:
        st.session_state["pending_message"] = None
    if "backend_info" not in st.session_state:
        st.session_state["backend_info"] = None


def new_chat() -> None:
    st.session_state["conversation"].reset()
    st.session_state["quizzes"] = {}
    st.session_state["editors"] = {}
    st.session_state["pending_message"] = None


def queue_message(text: Optional[str]) -> None:
    # Widget callbacks run before the script body; main() sends whatever is queued.
    if text:
        st.session_state["pending_message"] = text


def is_busy() -> bool:
    return st.session_state["conversation"].is_loading


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 1100px; padding-top: 2rem; padding-bottom: 2rem; }

.stButton>button {
  border-radius: 12px !important;
  padding: 0.55rem 0.90rem !important;
  font-weight: 650 !important;
}

/* Code editor */
div[data-testid="stTextArea"] textarea {
  font-family: ui-monospace, SFMono-Regular, Menlo, Consolas, monospace;
  font-size: 0.9rem;
}

div[data-testid="stChatInput"] textarea { min-height: 44px; }
</style>
""",
        unsafe_allow_html=True,
    )


# ----------------------------
# Sidebar
# ----------------------------
def render_sidebar() -> None:
    st.sidebar.title("Tutor")

    col1, col2 = st.sidebar.columns(2)
    with col1:
        if st.button("New chat", use_container_width=True, disabled=is_busy()):
            new_chat()
            st.rerun()

    with col2:
        if st.button("Check API", use_container_width=True, disabled=is_busy()):
            st.session_state["backend_info"] = st.session_state["client"].fetch_info()
            st.rerun()

    st.sidebar.divider()

    info = st.session_state.get("backend_info")
    if not info:
        st.sidebar.info("Ask for an explanation, a quiz, or a coding challenge.")
        return

    st.sidebar.markdown(f"**Mode:** `{info.get('mode', 'unknown')}`")
    st.sidebar.caption(info.get("message", ""))


# ----------------------------
# Widgets
# ----------------------------
def render_quiz(key: int, data: QuizData) -> None:
    quizzes = st.session_state["quizzes"]
    quiz = quizzes.get(key)
    if quiz is None:
        quiz = QuizSession(
            data,
            on_complete=lambda results, title=data.title: queue_message(build_quiz_report(title, results)),
        )
        quizzes[key] = quiz

    with st.container(border=True):
        if quiz.finished:
            st.markdown("#### Quiz complete! Great job.")
            st.caption(f"Score: {quiz.score} / {len(data.questions)}")
            return

        st.markdown(f"#### {data.title}")

        # Answered questions stay visible with their locked-in feedback.
        for number, result in enumerate(quiz.results, start=1):
            st.markdown(f"**Question {number}: {result.question}**")
            if result.is_correct:
                st.success(f"{result.user_answer}: {result.feedback}")
            else:
                st.error(f"{result.user_answer}: {result.feedback}")

        question = quiz.current_question
        st.markdown(f"**Question {quiz.current_index + 1}: {question.title}**")
        for a_idx, ans in enumerate(question.answers):
            st.button(
                ans.title,
                key=f"quiz-{key}-{quiz.current_index}-{a_idx}",
                on_click=quiz.answer,
                args=(a_idx,),
                disabled=is_busy(),
            )


def _code_key(key: int, file_index: int) -> str:
    return f"challenge-{key}-code-{file_index}"


def _apply_edit(editor: ChallengeEditor, key: int, file_index: int) -> None:
    # Bound to the file index, so an edit that arrives together with a tab switch still lands on its file.
    editor.update_file(file_index, st.session_state[_code_key(key, file_index)])


def _submit_challenge(editor: ChallengeEditor, key: int) -> None:
    # Button callbacks can run before the text_area's on_change; flush pending edits first.
    for file_index in range(len(editor.files)):
        code_key = _code_key(key, file_index)
        if code_key in st.session_state:
            editor.update_file(file_index, st.session_state[code_key])
    queue_message(editor.submit())


def render_challenge(key: int, data: ChallengeData, answered: bool = False) -> None:
    editors = st.session_state["editors"]
    editor = editors.get(key)
    if editor is None:
        editor = ChallengeEditor(data)
        editors[key] = editor

    reviewing = editor.status == "reviewing"
    # A later assistant message carries the review, so this widget is done.
    submitted = reviewing and answered

    with st.container(border=True):
        st.markdown(f"#### {data.title}")
        if submitted:
            st.caption("Submitted")
        elif reviewing:
            st.caption("Analyzing...")

        if data.feedback:
            st.warning("Analysis result")
            st.markdown(data.feedback)

        st.markdown(data.description)

        names = [f.name for f in editor.files]
        choice = st.radio(
            "Files",
            options=list(range(len(names))),
            format_func=lambda i: names[i],
            index=editor.active_index,
            horizontal=True,
            key=f"challenge-{key}-file",
        )
        editor.select_file(choice)

        active = editor.active_file
        st.caption(f"{active.name} · {active.language}")
        st.text_area(
            "Code",
            value=active.content,
            height=280,
            key=_code_key(key, editor.active_index),
            on_change=_apply_edit,
            args=(editor, key, editor.active_index),
            label_visibility="collapsed",
        )

        if submitted:
            label = "Submitted"
        elif reviewing:
            label = "Analyzing..."
        else:
            label = "Run & Submit"
        st.button(
            label,
            key=f"challenge-{key}-submit",
            on_click=_submit_challenge,
            args=(editor, key),
            disabled=reviewing or is_busy(),
        )


# ----------------------------
# Chat
# ----------------------------
def render_chat() -> None:
    conversation: Conversation = st.session_state["conversation"]
    if not conversation.messages:
        st.caption("Start a conversation!")

    for idx, msg in enumerate(conversation.messages):
        with st.chat_message(msg.role):
            st.markdown(msg.content)
            if msg.widget is None:
                continue
            if msg.widget.type == "quiz":
                render_quiz(idx, msg.widget.data)
            elif msg.widget.type == "coding_challenge":
                answered = any(m.role == "assistant" for m in conversation.messages[idx + 1 :])
                render_challenge(idx, msg.widget.data, answered=answered)


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Tutor Chat", layout="wide")
    inject_css()

    st.title("Tutor Chat")
    st.caption("Ask questions, take quizzes, and solve coding challenges.")

    ensure_session()
    render_sidebar()
    render_chat()

    user_input = st.chat_input("Type a message...", disabled=is_busy())
    outgoing = user_input or st.session_state["pending_message"]
    if not outgoing:
        return

    st.session_state["pending_message"] = None
    conversation: Conversation = st.session_state["conversation"]

    # Echo user message immediately
    with st.chat_message("user"):
        st.markdown(outgoing)

    with st.spinner("AI is thinking..."):
        conversation.send_message(outgoing)

    st.rerun()


if __name__ == "__main__":
    main()
