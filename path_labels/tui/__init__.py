from path_labels.tui.renderers import PathLabelsConsoleUI

__all__ = ["PathLabelsConsoleUI"]
