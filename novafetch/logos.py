"""Distribution logos as plain text art plus a primary color per distribution.

Art is stored without color codes; the renderer colors it. Lines keep their
inner whitespace since column alignment matters.
"""

from __future__ import annotations

from novafetch.ansi import RGB

# ── Art ─────────────────────────────────────────────────────────────────────

ARCH = r"""
      /\
     /  \
    /\   \
   /      \
  /   ,,   \
 /   |  |  -\
/_-''    ''-_\
"""

DEBIAN = r'''
       _,met$$$$$gg.
    ,g$$$$$$$$$$$$$$$P.
  ,g$$P"        """Y$$.".
 ,$$P'              `$$$.
',$$P       ,ggs.     `$$b:
`d$$'     ,$P"'   .    $$$
 $$P      d$'     ,    $$P
 $$:      $$.   -    ,d$$'
 $$;      Y$b._   _,d$P'
 Y$$.    `.`"Y$$$$P"'
 `$$b      "-.__
  `Y$$
   `Y$$.
     `$$b.
       `Y$$b.
          `"Y$b._
              `"""
'''

UBUNTU = r"""
            .-/+oossssoo+-.
        `:+ssssssssssssssssss+:`
      -+ssssssssssssssssssyyssss+-
    .ossssssssssssssssssdMMMNysssso.
   /ssssssssssshdmmNNmmyNMMMMhssssss\
  +ssssssssshmydMMMMMMMNddddyssssssss+
 /sssssssshNMMMyhhyyyhmNMMMNhssssssss\
.ssssssssdMMMNhsssssssssshNMMMdssssssss.
+sssshhhyNMMNyssssssssssssyNMMMysssssss+
ossyNMMMNyMMhsssssssssssssshmmmhssssssso
ossyNMMMNyMMhsssssssssssssshmmmhssssssso
+sssshhhyNMMNyssssssssssssyNMMMysssssss+
.ssssssssdMMMNhsssssssshNMMMdssssssss.
 \sssssssshNMMMyhhyyyhdNMMMNhssssssss/
  +sssssssssdmydMMMMMMMMddddyssssssss+
   \ssssssssssshdmNNNNmyNMMMMhssssss/
    .ossssssssssssssssssdMMMNysssso.
      -+sssssssssssssssssyyyssss+-
        `:+ssssssssssssssssss+:`
            .-\+oossssoo+/-.
"""

FEDORA = r"""
             .',;::::;,'.
         .';:cccccccccccc:;,.
      .;cccccccccccccccccccccc;.
    .:cccccccccccccccccccccccccc:.
  .;ccccccccccccc;.:dddl:.;ccccccc;.
 .:ccccccccccccc;OWMKOOXMWd;ccccccc:.
.:ccccccccccccc;KMMc;cc;xMMc;ccccccc:.
,cccccccccccccc;MMM.;cc;;WW:;cccccccc,
:cccccccccccccc;MMM.;cccccccccccccc:
:ccccccc;oxOOOo;MMM0OOk.;cccccccccccc:
cccccc;0MMKxdd:;MMMkddc.;cccccccccccc;
ccccc;XM0';cccc;MMM.;cccccccccccccccc'
ccccc;MMo;ccccc;MMW.;ccccccccccccccc;
ccccc;0MNc.ccc.xMMd;ccccccccccccccc;
cccccc;dNMWXXXWM0:;cccccccccccccc:,
cccccccc;.:odl:.;cccccccccccccc:,.
:cccccccccccccccccccccccccccc:'.
.:cccccccccccccccccccccc:;,..
  '::cccccccccccccc::;,.
"""

OPENSUSE = r"""
  ______  _   _ _____ ____ _____
 |  _ \ \| | | / ____/ ____| ____|
 | |_) | | | | | |  | (___ | |__
 |  _ <| | | | | |   \___ \|___ \
 |_| \_\ \____/ \_____|_____/_____|
"""

GENTOO = r"""
   _____
  /  __ \
 |  /  \/
 |  \__/\
 |  /  \/
  \ \__/\
   \____/
   _/  \_
"""

SLACKWARE = r"""
   _______________
  |  ___________  |
  | |           | |
  | |  Slack    | |
  | |___________| |
  |_______________|
"""

RHEL = r"""
   .---.
  /     \
 |  R H  |
 |   E   |
 |    L  |
  \_____/
"""

MINT = r"""
  \_____/
   \   /
    \ /
   _/ \_
  (     )
   \___/
  (     )
 (       )
"""

MANJARO = r"""
    ___
   |   |
   | M |
   | A |
   | N |
   |___|
"""

ENDEAVOUROS = r"""
   ______
  / ____ \
 | |    | |
 | |____| |
  \______/
"""

POP_OS = r"""
  ______
 |  __ \__
 | |__) \ \
 |  ___/ |
 |_|     \_\
"""

MX_LINUX = r"""
  __  __ __
 |  \/  |\ \
 | |\/| | > |
 |_|  |_|/_/
"""

ZORIN = r"""
  ______
 |__  /
   / /
  / /
 /_/
"""

ELEMENTARY = r"""
   ______
  / ____ \
 | |    | |
 | |____| |
  \______/
"""

KALI = r"""
  .;dk0KXXK0kd;.
 .x0KXXXXXXXXXK0x.
 .0XXXXXXXXXXXXX0.
 kXKx;.......;xKXk
 KX.  .;oo;.  .XK
 kX  .xXXXXx.  Xk
  Xk  ;xxxx;  kX
   Xk.      .kX
    XKxxxxxKX
"""

PARROT = r"""
  .''''.
 |  P   |
 |  A   |
 |  R   |
  '.__.'
"""

GARUDA = r"""
   _____
  /  _  \
 | | | | |
 | |_| | |
  \_____/
"""

NOBARA = r"""
  _   _
 | \ | |
 |  \| |
 | |\  |
 |_| \_|
"""

ALMALINUX = r"""
    _
   / |
  | |
  | |
  |_|
"""

ROCKY = r"""
  ____
 |  __ \
 | |__) |
 |  _  /
 |_|
"""

CENTOS = r"""
  _____
 / ____|
| |     ___
| |    / _ \
| |___| (_) |
 \_____\___/
"""

ALPINE = r"""
   /\
  /  \
 /    \
/______\
"""

ORACLE_LINUX = r"""
  ____
 |  _ \
 | | | |
 | |_| |
 |____/
"""

NIXOS = r"""
  _  ___
 | \|_ _|
 | .`| |
 |_|\___|
"""

VOID = r"""
 __      __
 \ \    / /
  \ \  / /
   \ \/ /
    \__/
"""

SOLUS = r"""
  _____
 / ___/
 \___ \
 ____/ /
/_____/
"""

PUPPY = r"""
   __
  /  \
 ( o.o )
  > ^ <
"""

FREEBSD = r"""
  _____
 |  ___|
 | |_
 |  _|
 |_|
"""

RASPBIAN = r"""
  ____
 |  __ \
 | |__) |
 |  _  /
 |_|
"""

WINDOWS10 = r"""
                                ..,
                    ....,,:;+ccllll
      ...,,+:;  cllllllllllllllllll
,cclllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll

llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
llllllllllllll  lllllllllllllllllll
`'ccllllllllll  lllllllllllllllllll
       `' \*::  :ccllllllllllllllll
                       ````''*::cll
                                 ``
"""

WINDOWS11 = r"""

################  ################
################  ################
################  ################
################  ################
################  ################
################  ################
################  ################
################  ################

################  ################
################  ################
################  ################
################  ################
################  ################
################  ################
################  ################
################  ################
"""

MACOS = r"""
                    c.'
                 ,xNMM.
               .OMMMMo
               lMM"
     .;loddo:.  .olloddol;.
   cKMMMMMMMMMMNWMMMMMMMMMM0:
 .KMMMMMMMMMMMMMMMMMMMMMMMWd.
 XMMMMMMMMMMMMMMMMMMMMMMMX.
;MMMMMMMMMMMMMMMMMMMMMMMM:
:MMMMMMMMMMMMMMMMMMMMMMMM:
.MMMMMMMMMMMMMMMMMMMMMMMMMX.
 kMMMMMMMMMMMMMMMMMMMMMMMMWd.
 'XMMMMMMMMMMMMMMMMMMMMMMMMMMk
  'XMMMMMMMMMMMMMMMMMMMMMMMMK.
    kMMMMMMMMMMMMMMMMMMMMMMd
     ;KMMMMMMMWXXWMMMMMMMk.
       "cooc*"    "*coo'"
"""

FALLBACK = r"""
   .---.
  /     \
 | .   . |
  \  ~  /
   \_/
  (   )
   ( )
"""

# ── Catalogue ───────────────────────────────────────────────────────────────

CYAN: RGB = (0, 255, 255)

CATALOGUE: dict[str, tuple[str, RGB]] = {
    "arch":        (ARCH, (23, 147, 209)),
    "debian":      (DEBIAN, (215, 10, 83)),
    "ubuntu":      (UBUNTU, (233, 84, 32)),
    "fedora":      (FEDORA, (81, 162, 218)),
    "opensuse":    (OPENSUSE, (115, 186, 37)),
    "gentoo":      (GENTOO, (84, 72, 124)),
    "slackware":   (SLACKWARE, (69, 96, 150)),
    "rhel":        (RHEL, (238, 0, 0)),
    "mint":        (MINT, (134, 190, 67)),
    "manjaro":     (MANJARO, (53, 191, 92)),
    "endeavouros": (ENDEAVOUROS, (127, 63, 191)),
    "pop_os":      (POP_OS, (72, 185, 199)),
    "mx":          (MX_LINUX, (200, 200, 200)),
    "zorin":       (ZORIN, (21, 166, 240)),
    "elementary":  (ELEMENTARY, (100, 186, 255)),
    "kali":        (KALI, (38, 139, 210)),
    "parrot":      (PARROT, (5, 232, 255)),
    "garuda":      (GARUDA, (224, 60, 255)),
    "nobara":      (NOBARA, (200, 200, 200)),
    "almalinux":   (ALMALINUX, (10, 191, 255)),
    "rocky":       (ROCKY, (16, 185, 129)),
    "centos":      (CENTOS, (147, 47, 143)),
    "alpine":      (ALPINE, (13, 89, 127)),
    "oracle":      (ORACLE_LINUX, (199, 70, 52)),
    "nixos":       (NIXOS, (126, 186, 228)),
    "void":        (VOID, (71, 128, 97)),
    "solus":       (SOLUS, (82, 148, 226)),
    "puppy":       (PUPPY, (200, 200, 200)),
    "freebsd":     (FREEBSD, (171, 43, 40)),
    "raspbian":    (RASPBIAN, (199, 5, 63)),
    "windows":     (WINDOWS10, (0, 120, 212)),
    "windows11":   (WINDOWS11, (0, 120, 212)),
    "macos":       (MACOS, (230, 230, 230)),
    "fallback":    (FALLBACK, CYAN),
}

ALIASES: dict[str, str] = {
    "archlinux": "arch",
    "linuxmint": "mint",
    "pop": "pop_os",
    "popos": "pop_os",
    "pop-os": "pop_os",
    "mxlinux": "mx",
    "elementaryos": "elementary",
    "kalilinux": "kali",
    "parrotos": "parrot",
    "garudalinux": "garuda",
    "rockylinux": "rocky",
    "ol": "oracle",
    "oraclelinux": "oracle",
    "redhat": "rhel",
    "suse": "opensuse",
    "windows10": "windows",
    "windows8": "windows",
    "darwin": "macos",
    "apple": "macos",
    "mac": "macos",
}

# Substring families, checked in order after exact and alias lookups
FAMILIES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("ubuntu",), "ubuntu"),
    (("mint",), "mint"),
    (("suse",), "opensuse"),
    (("centos", "rocky", "alma", "rhel", "redhat"), "rhel"),
    (("manjaro",), "manjaro"),
    (("arch",), "arch"),
    (("debian",), "debian"),
    (("fedora",), "fedora"),
    (("windows",), "windows"),
    (("macos", "darwin"), "macos"),
    (("bsd",), "freebsd"),
)


def split_art(raw: str) -> list[str]:
    """Drop the surrounding newlines of a stored block and split it into lines."""
    return raw.strip("\n").split("\n")


def normalize_slug(slug: str) -> str:
    return slug.lower().replace(" ", "")


def resolve_slug(slug: str) -> str:
    """Map any distribution name to a catalogue key (``fallback`` if nothing fits)."""
    slug = normalize_slug(slug)
    if slug in CATALOGUE:
        return slug
    if slug in ALIASES:
        return ALIASES[slug]
    for needles, key in FAMILIES:
        if any(n in slug for n in needles):
            return key
    return "fallback"


def get_logo(slug: str) -> tuple[list[str], RGB]:
    """Art lines and primary color for *slug*."""
    art, color = CATALOGUE[resolve_slug(slug)]
    return split_art(art), color


def supported_slugs() -> list[str]:
    return list(CATALOGUE)
