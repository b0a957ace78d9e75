from dataclasses import dataclass

# Placeholder id of a task that has never been written to the database
UNSAVED_ID = -1


@dataclass
class Task:
    title: str
    description: str = ""
    deadline: str = ""
    duration: str = ""
    is_done: bool = False
    id: int = UNSAVED_ID

    @property
    def is_persisted(self) -> bool:
        return self.id != UNSAVED_ID

    def display_text(self) -> str:
        """Title, description and deadline/duration on separate lines."""
        lines = [self.title]
        if self.description:
            lines.append(self.description)
        details = " · ".join(part for part in (self.deadline, self.duration) if part)
        if details:
            lines.append(details)
        return "\n".join(lines)
