"""ANSI escape sequences for coloured terminal output."""

_ESC = "\x1b["

# Regular text
BLK = f"{_ESC}0;30m"
RED = f"{_ESC}0;31m"
GRN = f"{_ESC}0;32m"
YEL = f"{_ESC}0;33m"
BLU = f"{_ESC}0;34m"
MAG = f"{_ESC}0;35m"
CYN = f"{_ESC}0;36m"
WHT = f"{_ESC}0;37m"

# Bold text
BBLK = f"{_ESC}1;30m"
BRED = f"{_ESC}1;31m"
BGRN = f"{_ESC}1;32m"
BYEL = f"{_ESC}1;33m"
BBLU = f"{_ESC}1;34m"
BMAG = f"{_ESC}1;35m"
BCYN = f"{_ESC}1;36m"
BWHT = f"{_ESC}1;37m"

# Underlined text
UBLK = f"{_ESC}4;30m"
URED = f"{_ESC}4;31m"
UGRN = f"{_ESC}4;32m"
UYEL = f"{_ESC}4;33m"
UBLU = f"{_ESC}4;34m"
UMAG = f"{_ESC}4;35m"
UCYN = f"{_ESC}4;36m"
UWHT = f"{_ESC}4;37m"

# Backgrounds
BLKB = f"{_ESC}40m"
REDB = f"{_ESC}41m"
GRNB = f"{_ESC}42m"
YELB = f"{_ESC}43m"
BLUB = f"{_ESC}44m"
MAGB = f"{_ESC}45m"
CYNB = f"{_ESC}46m"
WHTB = f"{_ESC}47m"

# High intensity backgrounds
BLKHB = f"{_ESC}0;100m"
REDHB = f"{_ESC}0;101m"
GRNHB = f"{_ESC}0;102m"
YELHB = f"{_ESC}0;103m"
BLUHB = f"{_ESC}0;104m"
MAGHB = f"{_ESC}0;105m"
CYNHB = f"{_ESC}0;106m"
WHTHB = f"{_ESC}0;107m"

# High intensity text
HBLK = f"{_ESC}0;90m"
HRED = f"{_ESC}0;91m"
HGRN = f"{_ESC}0;92m"
HYEL = f"{_ESC}0;93m"
HBLU = f"{_ESC}0;94m"
HMAG = f"{_ESC}0;95m"
HCYN = f"{_ESC}0;96m"
HWHT = f"{_ESC}0;97m"

# Bold high intensity text
BHBLK = f"{_ESC}1;90m"
BHRED = f"{_ESC}1;91m"
BHGRN = f"{_ESC}1;92m"
BHYEL = f"{_ESC}1;93m"
BHBLU = f"{_ESC}1;94m"
BHMAG = f"{_ESC}1;95m"
BHCYN = f"{_ESC}1;96m"
BHWHT = f"{_ESC}1;97m"

RESET = f"{_ESC}0m"