from enum import Enum

from path_labels.rules.models import MatchMode


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


MATCH_MODE_STYLE = {
    MatchMode.PREFIX: UIStyle.CYAN.value,
    MatchMode.EXACT: UIStyle.DIM.value,
}
