# Role: Built-in quiz returned by the no-argument get_quiz_data tool (sample_quiz mode).

from __future__ import annotations

SAMPLE_QUIZ = {
    "title": "JavaScript Basics",
    "questions": [
        {
            "title": "Which keyword declares a block-scoped variable that can be reassigned?",
            "answers": [
                {
                    "title": "var",
                    "feedback": "var is function-scoped, not block-scoped.",
                    "isCorrect": False,
                },
                {
                    "title": "let",
                    "feedback": "Correct! let is block-scoped and can be reassigned.",
                    "isCorrect": True,
                },
                {
                    "title": "const",
                    "feedback": "const is block-scoped but cannot be reassigned.",
                    "isCorrect": False,
                },
            ],
        },
        {
            "title": "What does `typeof null` return?",
            "answers": [
                {
                    "title": '"null"',
                    "feedback": "Surprisingly not. This is a long-standing quirk of the language.",
                    "isCorrect": False,
                },
                {
                    "title": '"object"',
                    "feedback": "Correct! typeof null is \"object\" for historical reasons.",
                    "isCorrect": True,
                },
                {
                    "title": '"undefined"',
                    "feedback": "undefined is a different value with its own type.",
                    "isCorrect": False,
                },
            ],
        },
        {
            "title": "Which method adds an element to the end of an array?",
            "answers": [
                {
                    "title": "push()",
                    "feedback": "Correct! push() appends and returns the new length.",
                    "isCorrect": True,
                },
                {
                    "title": "shift()",
                    "feedback": "shift() removes the first element.",
                    "isCorrect": False,
                },
                {
                    "title": "unshift()",
                    "feedback": "unshift() adds to the start of the array.",
                    "isCorrect": False,
                },
            ],
        },
    ],
}
