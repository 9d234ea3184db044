#===============================================================================
#  rmenu  |  Search-as-you-type Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  A small frameless launcher window. Type the start of a program name, the
#  shortest matching executables on PATH are listed, move with Up/Down and
#  press Enter to start the highlighted one (inside a terminal by default).
#  The launcher exits as soon as it has started a program.
#
#  Keys
#  ----
#    Enter          -> launch highlighted suggestion
#    Up / Down      -> move highlight
#    Left / Right   -> move cursor in the entry line
#    Backspace      -> delete before cursor (repeats while held)
#    Escape         -> close without launching
#
#  Environment
#  -----------
#    RMENU_TERMINAL   -> terminal wrapper (default "alacritty -e", "" = none)
#    RMENU_FONT       -> font file (default /usr/local/bin/iosevka-regular.ttf)
#    RMENU_FONT_SIZE  -> font pixel size (default 32)
#    RMENU_LOG_LEVEL  -> DEBUG | INFO | WARNING | ERROR (default WARNING)
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

import sys

from rmenu.app import main


if __name__ == "__main__":
    sys.exit(main())
