"""
fzf preview command synthesis

fzf runs the preview command once per highlighted line, substituting {} with the quoted path of
the candidate. Its own stdout is a pipe at that point, so tools like chafa cannot discover the
terminal size themselves; the geometry is computed here from the TerminalProfile instead.
"""

import shlex

from wallow.terminal import Capability, TerminalProfile


# share of the terminal width given to the preview pane
PREVIEW_WIDTH_PERCENT = 60
# rows reserved for fzf's prompt and info line
RESERVED_ROWS = 2

KITTY_PREVIEW = (
    "kitty +kitten icat --clear --transfer-mode=memory --stdin=no "
    "--place=${FZF_PREVIEW_COLUMNS}x${FZF_PREVIEW_LINES}@0x0 {}"
)
ITERM2_PREVIEW = "imgcat -W ${FZF_PREVIEW_COLUMNS} -H ${FZF_PREVIEW_LINES} {}"
FILENAME_PREVIEW = "echo {}"


def preview_geometry(profile: TerminalProfile) -> tuple[int, int]:
    width = max(profile.columns * PREVIEW_WIDTH_PERCENT // 100, 20)
    height = max(profile.rows - RESERVED_ROWS, 10)
    return width, height


def build_preview_command(profile: TerminalProfile) -> str:
    width, height = preview_geometry(profile)
    size = f"-s {width}x{height}"

    if profile.capability is Capability.WEZTERM_CHAFA:
        return f"chafa -f iterm {size} --animate false {{}}"

    if profile.capability is Capability.KITTY:
        return KITTY_PREVIEW

    if profile.capability is Capability.ITERM2:
        return ITERM2_PREVIEW

    if profile.capability is Capability.CHAFA:
        return f"chafa {size} --animate false {{}}"

    return FILENAME_PREVIEW


def quote_fragment(fragment: str) -> str:
    """
    Quote fragment for nesting inside the outer 'sh -c' string. Single quoting keeps quote
    characters and the ${FZF_PREVIEW_*} references intact for fzf's own shell.
    """

    return shlex.quote(fragment)
