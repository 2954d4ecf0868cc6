"""User-facing text for the terminal front end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Turn prompt ──────────────────────────────────────────────────────
    turn_header: str  # "{mark}'s turn!"
    turn_instructions: str
    input_marker: str

    # ── Errors ───────────────────────────────────────────────────────────
    error_bad_response: str
    error_already_taken: str

    # ── End of round ─────────────────────────────────────────────────────
    banner_win: str  # "{mark} WINS!!!"
    banner_tie: str
    continue_prompt: str

    def turn_prompt(self, mark: str) -> str:
        return (
            self.turn_header.format(mark=mark)
            + "\n"
            + self.turn_instructions
            + self.input_marker
        )

    def win_banner(self, mark: str) -> str:
        return self.banner_win.format(mark=mark)


ENGLISH = Strings(
    turn_header="{mark}'s turn!",
    turn_instructions=(
        "Enter Row,Col you wish to place a piece (ex, A1 or C3)\n"
        "Or enter 'q' to quit or 'r' to restart this round\n"
        "note: be careful of extra whitespace flagging invalid answer\n"
    ),
    input_marker=">: ",
    error_bad_response="ERROR! Bad response given.",
    error_already_taken="ERROR! That position is already filled.",
    banner_win="    {mark} WINS!!!",
    banner_tie="     TIE GAME!",
    continue_prompt="Enter 'q' to quit, or anything else to continue: ",
)
