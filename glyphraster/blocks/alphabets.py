"""Literal glyph tables, indexed by block pattern.

Entry ``i`` of a table is the glyph for pattern ``i``, where bit ``j`` of the
pattern is the pixel at the ``j``-th canonical offset of the block geometry
(see ``shapes.py``). Reordering any table is a format change.
"""

# Full block.
SOLIDS = " █"

BINARIES = "01"

XXS = " X"

# Upper and lower half blocks.
HALVES = " ▀▄█"

ASCIIS = " ^v%"

# Quadrant block elements.
QUADS = (
    " ▘▝▀▖▌▞▛"
    "▗▚▐▜▄▙▟█"
)

# Separated quadrants, U+1CC21..U+1CC2F.
QUADS_SEPARATED = (
    "\u00a0𜰡𜰢𜰣𜰤𜰥𜰦𜰧"
    "𜰨𜰩𜰪𜰫𜰬𜰭𜰮𜰯"
)

# Block sextants, U+1FB00..U+1FB3B plus the half blocks they omit.
SEXTANTS = (
    " 🬀🬁🬂🬃🬄🬅🬆"
    "🬇🬈🬉🬊🬋🬌🬍🬎"
    "🬏🬐🬑🬒🬓▌🬔🬕"
    "🬖🬗🬘🬙🬚🬛🬜🬝"
    "🬞🬟🬠🬡🬢🬣🬤🬥"
    "🬦🬧▐🬨🬩🬪🬫🬬"
    "🬭🬮🬯🬰🬱🬲🬳🬴"
    "🬵🬶🬷🬸🬹🬺🬻█"
)

# Separated sextants, U+1CE51..U+1CE8F.
SEXTANTS_SEPARATED = (
    "\u00a0𜹑𜹒𜹓𜹔𜹕𜹖𜹗"
    "𜹘𜹙𜹚𜹛𜹜𜹝𜹞𜹟"
    "𜹠𜹡𜹢𜹣𜹤𜹥𜹦𜹧"
    "𜹨𜹩𜹪𜹫𜹬𜹭𜹮𜹯"
    "𜹰𜹱𜹲𜹳𜹴𜹵𜹶𜹷"
    "𜹸𜹹𜹺𜹻𜹼𜹽𜹾𜹿"
    "𜺀𜺁𜺂𜺃𜺄𜺅𜺆𜺇"
    "𜺈𜺉𜺊𜺋𜺌𜺍𜺎𜺏"
)

# Block octants, U+1CD00..U+1CDE5, with block elements and legacy computing
# glyphs standing in for the shapes those already cover.
OCTANTS = (
    "\u00a0𜺨𜺫🮂𜴀▘𜴁𜴂"
    "𜴃𜴄▝𜴅𜴆𜴇𜴈▀"
    "𜴉𜴊𜴋𜴌🯦𜴍𜴎𜴏"
    "𜴐𜴑𜴒𜴓𜴔𜴕𜴖𜴗"
    "𜴘𜴙𜴚𜴛𜴜𜴝𜴞𜴟"
    "🯧𜴠𜴡𜴢𜴣𜴤𜴥𜴦"
    "𜴧𜴨𜴩𜴪𜴫𜴬𜴭𜴮"
    "𜴯𜴰𜴱𜴲𜴳𜴴𜴵🮅"
    "𜺣𜴶𜴷𜴸𜴹𜴺𜴻𜴼"
    "𜴽𜴾𜴿𜵀𜵁𜵂𜵃𜵄"
    "▖𜵅𜵆𜵇𜵈▌𜵉𜵊"
    "𜵋𜵌▞𜵍𜵎𜵏𜵐▛"
    "𜵑𜵒𜵓𜵔𜵕𜵖𜵗𜵘"
    "𜵙𜵚𜵛𜵜𜵝𜵞𜵟𜵠"
    "𜵡𜵢𜵣𜵤𜵥𜵦𜵧𜵨"
    "𜵩𜵪𜵫𜵬𜵭𜵮𜵯𜵰"
    "𜺠𜵱𜵲𜵳𜵴𜵵𜵶𜵷"
    "𜵸𜵹𜵺𜵻𜵼𜵽𜵾𜵿"
    "𜶀𜶁𜶂𜶃𜶄𜶅𜶆𜶇"
    "𜶈𜶉𜶊𜶋𜶌𜶍𜶎𜶏"
    "▗𜶐𜶑𜶒𜶓▚𜶔𜶕"
    "𜶖𜶗▐𜶘𜶙𜶚𜶛▜"
    "𜶜𜶝𜶞𜶟𜶠𜶡𜶢𜶣"
    "𜶤𜶥𜶦𜶧𜶨𜶩𜶪𜶫"
    "▂𜶬𜶭𜶮𜶯𜶰𜶱𜶲"
    "𜶳𜶴𜶵𜶶𜶷𜶸𜶹𜶺"
    "𜶻𜶼𜶽𜶾𜶿𜷀𜷁𜷂"
    "𜷃𜷄𜷅𜷆𜷇𜷈𜷉𜷊"
    "𜷋𜷌𜷍𜷎𜷏𜷐𜷑𜷒"
    "𜷓𜷔𜷕𜷖𜷗𜷘𜷙𜷚"
    "▄𜷛𜷜𜷝𜷞▙𜷟𜷠"
    "𜷡𜷢▟𜷣▆𜷤𜷥█"
)

# Braille patterns. Dots 1-8 do not follow the canonical bit order,
# so the table is not simply U+2800 + pattern.
BRAILLE = (
    "⠀⠁⠈⠉⠂⠃⠊⠋"
    "⠐⠑⠘⠙⠒⠓⠚⠛"
    "⠄⠅⠌⠍⠆⠇⠎⠏"
    "⠔⠕⠜⠝⠖⠗⠞⠟"
    "⠠⠡⠨⠩⠢⠣⠪⠫"
    "⠰⠱⠸⠹⠲⠳⠺⠻"
    "⠤⠥⠬⠭⠦⠧⠮⠯"
    "⠴⠵⠼⠽⠶⠷⠾⠿"
    "⡀⡁⡈⡉⡂⡃⡊⡋"
    "⡐⡑⡘⡙⡒⡓⡚⡛"
    "⡄⡅⡌⡍⡆⡇⡎⡏"
    "⡔⡕⡜⡝⡖⡗⡞⡟"
    "⡠⡡⡨⡩⡢⡣⡪⡫"
    "⡰⡱⡸⡹⡲⡳⡺⡻"
    "⡤⡥⡬⡭⡦⡧⡮⡯"
    "⡴⡵⡼⡽⡶⡷⡾⡿"
    "⢀⢁⢈⢉⢂⢃⢊⢋"
    "⢐⢑⢘⢙⢒⢓⢚⢛"
    "⢄⢅⢌⢍⢆⢇⢎⢏"
    "⢔⢕⢜⢝⢖⢗⢞⢟"
    "⢠⢡⢨⢩⢢⢣⢪⢫"
    "⢰⢱⢸⢹⢲⢳⢺⢻"
    "⢤⢥⢬⢭⢦⢧⢮⢯"
    "⢴⢵⢼⢽⢶⢷⢾⢿"
    "⣀⣁⣈⣉⣂⣃⣊⣋"
    "⣐⣑⣘⣙⣒⣓⣚⣛"
    "⣄⣅⣌⣍⣆⣇⣎⣏"
    "⣔⣕⣜⣝⣖⣗⣞⣟"
    "⣠⣡⣨⣩⣢⣣⣪⣫"
    "⣰⣱⣸⣹⣲⣳⣺⣻"
    "⣤⣥⣬⣭⣦⣧⣮⣯"
    "⣴⣵⣼⣽⣶⣷⣾⣿"
)
