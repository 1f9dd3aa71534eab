# Role: Coding-challenge widget state: an in-memory multi-file buffer, the active file tab, and the
# idle -> reviewing status. Submitting serializes the files plus the original requirements into a message.

from __future__ import annotations

from typing import List, Literal, Optional

from tutor_backend.models.widget import ChallengeData, FileData

ChallengeStatus = Literal["idle", "reviewing"]


class ChallengeEditor:
    def __init__(self, data: ChallengeData) -> None:
        self.reset(data)

    def reset(self, data: ChallengeData) -> None:
        # Key line: new challenge data (e.g. a review) replaces the buffer and re-enables submit.
        self.data = data
        self.files: List[FileData] = [f.model_copy() for f in data.files]
        self.active_index = 0
        self.status: ChallengeStatus = "idle"

    @property
    def active_file(self) -> FileData:
        return self.files[self.active_index]

    def select_file(self, index: int) -> None:
        if not 0 <= index < len(self.files):
            raise IndexError(f"file index {index} out of range")
        self.active_index = index

    def update_file(self, index: int, content: str) -> None:
        if not 0 <= index < len(self.files):
            raise IndexError(f"file index {index} out of range")
        self.files[index] = self.files[index].model_copy(update={"content": content})

    def update_active_file(self, content: str) -> None:
        self.update_file(self.active_index, content)

    def submit(self) -> Optional[str]:
        """Mark the challenge as under review and return the report message (None if already submitted)."""
        if self.status == "reviewing":
            return None
        self.status = "reviewing"
        return build_challenge_report(self.data, self.files)


def build_challenge_report(data: ChallengeData, files: List[FileData]) -> str:
    parts = [
        f'I have submitted my solution for the coding challenge "{data.title}".',
        "",
        "Original requirements:",
        data.description,
        "",
        "My code:",
    ]
    for f in files:
        parts.append("")
        parts.append(f"File: {f.name} ({f.language})")
        parts.append(f"```{f.language}")
        parts.append(f.content)
        parts.append("```")

    parts.append("")
    parts.append("Please review my code against the requirements.")
    return "\n".join(parts)
