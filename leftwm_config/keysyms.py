"""
X11 key symbol and modifier lookup tables.

Maps the textual key names used in keybind declarations (e.g. "Return",
"k", "F1", "XF86AudioMute") to their X keysym codes, and modifier names
(e.g. "Shift", "Mod4") to their modifier masks.

The placeholders "modkey" and "mousekey" are not modifiers in their own
right; they are substituted by the window manager at bind time and must
be special-cased by callers (see ``is_placeholder``).
"""

import string
from typing import Dict, List, Optional

PLACEHOLDER_MODIFIERS = ("modkey", "mousekey")

# Sentinel used when a keybind declares no modifier at all.
NO_MODIFIER = "None"

# X11 modifier masks (X.h). Mod2 is absent: it is NumLock on
# virtually every keymap and its state is ignored when grabbing keys.
MODIFIERS: Dict[str, int] = {
    NO_MODIFIER: 1 << 15,  # AnyModifier
    "Shift": 1 << 0,
    "Control": 1 << 2,
    "Mod1": 1 << 3,
    "Alt": 1 << 3,
    "Mod3": 1 << 5,
    "Mod4": 1 << 6,
    "Super": 1 << 6,
    "Mod5": 1 << 7,
}


def _build_keysyms() -> Dict[str, int]:
    table: Dict[str, int] = {}

    # Latin-1 printable range: names for punctuation, raw chars for
    # letters and digits.
    punctuation = {
        "space": 0x0020,
        "exclam": 0x0021,
        "quotedbl": 0x0022,
        "numbersign": 0x0023,
        "dollar": 0x0024,
        "percent": 0x0025,
        "ampersand": 0x0026,
        "apostrophe": 0x0027,
        "quoteright": 0x0027,
        "parenleft": 0x0028,
        "parenright": 0x0029,
        "asterisk": 0x002A,
        "plus": 0x002B,
        "comma": 0x002C,
        "minus": 0x002D,
        "period": 0x002E,
        "slash": 0x002F,
        "colon": 0x003A,
        "semicolon": 0x003B,
        "less": 0x003C,
        "equal": 0x003D,
        "greater": 0x003E,
        "question": 0x003F,
        "at": 0x0040,
        "bracketleft": 0x005B,
        "backslash": 0x005C,
        "bracketright": 0x005D,
        "asciicircum": 0x005E,
        "underscore": 0x005F,
        "grave": 0x0060,
        "quoteleft": 0x0060,
        "braceleft": 0x007B,
        "bar": 0x007C,
        "braceright": 0x007D,
        "asciitilde": 0x007E,
    }
    table.update(punctuation)

    for char in string.digits + string.ascii_uppercase + string.ascii_lowercase:
        table[char] = ord(char)

    # Latin-1 supplement
    table.update({
        "nobreakspace": 0x00A0,
        "exclamdown": 0x00A1,
        "cent": 0x00A2,
        "sterling": 0x00A3,
        "currency": 0x00A4,
        "yen": 0x00A5,
        "brokenbar": 0x00A6,
        "section": 0x00A7,
        "diaeresis": 0x00A8,
        "copyright": 0x00A9,
        "ordfeminine": 0x00AA,
        "guillemotleft": 0x00AB,
        "guillemetleft": 0x00AB,
        "notsign": 0x00AC,
        "hyphen": 0x00AD,
        "registered": 0x00AE,
        "macron": 0x00AF,
        "degree": 0x00B0,
        "plusminus": 0x00B1,
        "twosuperior": 0x00B2,
        "threesuperior": 0x00B3,
        "acute": 0x00B4,
        "mu": 0x00B5,
        "paragraph": 0x00B6,
        "periodcentered": 0x00B7,
        "cedilla": 0x00B8,
        "onesuperior": 0x00B9,
        "masculine": 0x00BA,
        "ordmasculine": 0x00BA,
        "guillemotright": 0x00BB,
        "guillemetright": 0x00BB,
        "onequarter": 0x00BC,
        "onehalf": 0x00BD,
        "threequarters": 0x00BE,
        "questiondown": 0x00BF,
        "ssharp": 0x00DF,
        "division": 0x00F7,
        "ydiaeresis": 0x00FF,
    })

    # 0xC0-0xDE are the capital letters, 0xE0-0xFE their lowercase
    # forms; 0xD7 (multiply) has no lowercase counterpart.
    capitals = [
        "Agrave", "Aacute", "Acircumflex", "Atilde", "Adiaeresis", "Aring", "AE", "Ccedilla",
        "Egrave", "Eacute", "Ecircumflex", "Ediaeresis", "Igrave", "Iacute", "Icircumflex", "Idiaeresis",
        "ETH", "Ntilde", "Ograve", "Oacute", "Ocircumflex", "Otilde", "Odiaeresis", "multiply",
        "Oslash", "Ugrave", "Uacute", "Ucircumflex", "Udiaeresis", "Yacute", "THORN",
    ]
    for offset, name in enumerate(capitals):
        table[name] = 0x00C0 + offset
        if name != "multiply":
            table[name.lower()] = 0x00E0 + offset
    table.update({"Eth": 0x00D0, "Thorn": 0x00DE, "Ooblique": 0x00D8, "ooblique": 0x00F8})

    # TTY function keys
    table.update({
        "BackSpace": 0xFF08,
        "Tab": 0xFF09,
        "Linefeed": 0xFF0A,
        "Clear": 0xFF0B,
        "Return": 0xFF0D,
        "Pause": 0xFF13,
        "Scroll_Lock": 0xFF14,
        "Sys_Req": 0xFF15,
        "Escape": 0xFF1B,
        "Delete": 0xFFFF,
    })

    # International and multi-key character composition
    table.update({
        "Multi_key": 0xFF20,
        "Codeinput": 0xFF37,
        "SingleCandidate": 0xFF3C,
        "MultipleCandidate": 0xFF3D,
        "PreviousCandidate": 0xFF3E,
        "Kanji": 0xFF21,
        "Muhenkan": 0xFF22,
        "Henkan_Mode": 0xFF23,
        "Henkan": 0xFF23,
        "Romaji": 0xFF24,
        "Hiragana": 0xFF25,
        "Katakana": 0xFF26,
        "Hiragana_Katakana": 0xFF27,
        "Zenkaku": 0xFF28,
        "Hankaku": 0xFF29,
        "Zenkaku_Hankaku": 0xFF2A,
        "Touroku": 0xFF2B,
        "Massyo": 0xFF2C,
        "Kana_Lock": 0xFF2D,
        "Kana_Shift": 0xFF2E,
        "Eisu_Shift": 0xFF2F,
        "Eisu_toggle": 0xFF30,
        "Hangul": 0xFF31,
        "Hangul_Hanja": 0xFF34,
        "Mode_switch": 0xFF7E,
        "script_switch": 0xFF7E,
    })

    # Cursor control
    table.update({
        "Home": 0xFF50,
        "Left": 0xFF51,
        "Up": 0xFF52,
        "Right": 0xFF53,
        "Down": 0xFF54,
        "Prior": 0xFF55,
        "Page_Up": 0xFF55,
        "Next": 0xFF56,
        "Page_Down": 0xFF56,
        "End": 0xFF57,
        "Begin": 0xFF58,
    })

    # Misc functions
    table.update({
        "Select": 0xFF60,
        "Print": 0xFF61,
        "Execute": 0xFF62,
        "Insert": 0xFF63,
        "Undo": 0xFF65,
        "Redo": 0xFF66,
        "Menu": 0xFF67,
        "Find": 0xFF68,
        "Cancel": 0xFF69,
        "Help": 0xFF6A,
        "Break": 0xFF6B,
        "Num_Lock": 0xFF7F,
    })

    # Keypad
    table.update({
        "KP_Space": 0xFF80,
        "KP_Tab": 0xFF89,
        "KP_Enter": 0xFF8D,
        "KP_Home": 0xFF95,
        "KP_Left": 0xFF96,
        "KP_Up": 0xFF97,
        "KP_Right": 0xFF98,
        "KP_Down": 0xFF99,
        "KP_Prior": 0xFF9A,
        "KP_Page_Up": 0xFF9A,
        "KP_Next": 0xFF9B,
        "KP_Page_Down": 0xFF9B,
        "KP_End": 0xFF9C,
        "KP_Begin": 0xFF9D,
        "KP_Insert": 0xFF9E,
        "KP_Delete": 0xFF9F,
        "KP_Multiply": 0xFFAA,
        "KP_Add": 0xFFAB,
        "KP_Separator": 0xFFAC,
        "KP_Subtract": 0xFFAD,
        "KP_Decimal": 0xFFAE,
        "KP_Divide": 0xFFAF,
        "KP_Equal": 0xFFBD,
    })
    for number in range(1, 5):
        table[f"KP_F{number}"] = 0xFF91 + number - 1
    for digit in range(10):
        table[f"KP_{digit}"] = 0xFFB0 + digit

    for number in range(1, 36):
        table[f"F{number}"] = 0xFFBE + number - 1
    # Sun keyboard aliases: L1-L10 are F11-F20, R1-R15 are F21-F35
    for number in range(1, 11):
        table[f"L{number}"] = table[f"F{number + 10}"]
    for number in range(1, 16):
        table[f"R{number}"] = table[f"F{number + 20}"]

    # Modifier keys, bindable as plain keys
    table.update({
        "Shift_L": 0xFFE1,
        "Shift_R": 0xFFE2,
        "Control_L": 0xFFE3,
        "Control_R": 0xFFE4,
        "Caps_Lock": 0xFFE5,
        "Shift_Lock": 0xFFE6,
        "Meta_L": 0xFFE7,
        "Meta_R": 0xFFE8,
        "Alt_L": 0xFFE9,
        "Alt_R": 0xFFEA,
        "Super_L": 0xFFEB,
        "Super_R": 0xFFEC,
        "Hyper_L": 0xFFED,
        "Hyper_R": 0xFFEE,
    })

    # ISO 9995 function and modifier keys
    table.update({
        "ISO_Lock": 0xFE01,
        "ISO_Level2_Latch": 0xFE02,
        "ISO_Level3_Shift": 0xFE03,
        "ISO_Level3_Latch": 0xFE04,
        "ISO_Level3_Lock": 0xFE05,
        "ISO_Group_Shift": 0xFF7E,
        "ISO_Group_Latch": 0xFE06,
        "ISO_Group_Lock": 0xFE07,
        "ISO_Next_Group": 0xFE08,
        "ISO_Next_Group_Lock": 0xFE09,
        "ISO_Prev_Group": 0xFE0A,
        "ISO_Prev_Group_Lock": 0xFE0B,
        "ISO_First_Group": 0xFE0C,
        "ISO_First_Group_Lock": 0xFE0D,
        "ISO_Last_Group": 0xFE0E,
        "ISO_Last_Group_Lock": 0xFE0F,
        "ISO_Level5_Shift": 0xFE11,
        "ISO_Level5_Latch": 0xFE12,
        "ISO_Level5_Lock": 0xFE13,
        "ISO_Left_Tab": 0xFE20,
        "ISO_Move_Line_Up": 0xFE21,
        "ISO_Move_Line_Down": 0xFE22,
        "ISO_Partial_Line_Up": 0xFE23,
        "ISO_Partial_Line_Down": 0xFE24,
        "ISO_Partial_Space_Left": 0xFE25,
        "ISO_Partial_Space_Right": 0xFE26,
        "ISO_Set_Margin_Left": 0xFE27,
        "ISO_Set_Margin_Right": 0xFE28,
        "ISO_Release_Margin_Left": 0xFE29,
        "ISO_Release_Margin_Right": 0xFE2A,
        "ISO_Release_Both_Margins": 0xFE2B,
        "ISO_Fast_Cursor_Left": 0xFE2C,
        "ISO_Fast_Cursor_Right": 0xFE2D,
        "ISO_Fast_Cursor_Up": 0xFE2E,
        "ISO_Fast_Cursor_Down": 0xFE2F,
        "ISO_Continuous_Underline": 0xFE30,
        "ISO_Discontinuous_Underline": 0xFE31,
        "ISO_Emphasize": 0xFE32,
        "ISO_Center_Object": 0xFE33,
        "ISO_Enter": 0xFE34,
        "First_Virtual_Screen": 0xFED0,
        "Prev_Virtual_Screen": 0xFED1,
        "Next_Virtual_Screen": 0xFED2,
        "Last_Virtual_Screen": 0xFED4,
        "Terminate_Server": 0xFED5,
    })

    dead_keys = [
        "grave", "acute", "circumflex", "tilde", "macron", "breve", "abovedot", "diaeresis",
        "abovering", "doubleacute", "caron", "cedilla", "ogonek", "iota", "voiced_sound",
        "semivoiced_sound", "belowdot",
    ]
    for offset, name in enumerate(dead_keys):
        table[f"dead_{name}"] = 0xFE50 + offset

    # XF86 vendor keys (XF86keysym.h), listed without the XF86 prefix
    vendor = {
        "ModeLock": 0x1008FF01,
        "MonBrightnessUp": 0x1008FF02,
        "MonBrightnessDown": 0x1008FF03,
        "KbdLightOnOff": 0x1008FF04,
        "KbdBrightnessUp": 0x1008FF05,
        "KbdBrightnessDown": 0x1008FF06,
        "MonBrightnessCycle": 0x1008FF07,
        "Standby": 0x1008FF10,
        "AudioLowerVolume": 0x1008FF11,
        "AudioMute": 0x1008FF12,
        "AudioRaiseVolume": 0x1008FF13,
        "AudioPlay": 0x1008FF14,
        "AudioStop": 0x1008FF15,
        "AudioPrev": 0x1008FF16,
        "AudioNext": 0x1008FF17,
        "HomePage": 0x1008FF18,
        "Mail": 0x1008FF19,
        "Start": 0x1008FF1A,
        "Search": 0x1008FF1B,
        "AudioRecord": 0x1008FF1C,
        "Calculator": 0x1008FF1D,
        "Memo": 0x1008FF1E,
        "ToDoList": 0x1008FF1F,
        "Calendar": 0x1008FF20,
        "PowerDown": 0x1008FF21,
        "ContrastAdjust": 0x1008FF22,
        "RockerUp": 0x1008FF23,
        "RockerDown": 0x1008FF24,
        "RockerEnter": 0x1008FF25,
        "Back": 0x1008FF26,
        "Forward": 0x1008FF27,
        "Stop": 0x1008FF28,
        "Refresh": 0x1008FF29,
        "PowerOff": 0x1008FF2A,
        "WakeUp": 0x1008FF2B,
        "Eject": 0x1008FF2C,
        "ScreenSaver": 0x1008FF2D,
        "WWW": 0x1008FF2E,
        "Sleep": 0x1008FF2F,
        "Favorites": 0x1008FF30,
        "AudioPause": 0x1008FF31,
        "AudioMedia": 0x1008FF32,
        "MyComputer": 0x1008FF33,
        "VendorHome": 0x1008FF34,
        "LightBulb": 0x1008FF35,
        "Shop": 0x1008FF36,
        "History": 0x1008FF37,
        "OpenURL": 0x1008FF38,
        "AddFavorite": 0x1008FF39,
        "HotLinks": 0x1008FF3A,
        "BrightnessAdjust": 0x1008FF3B,
        "Finance": 0x1008FF3C,
        "Community": 0x1008FF3D,
        "AudioRewind": 0x1008FF3E,
        "BackForward": 0x1008FF3F,
        "ApplicationLeft": 0x1008FF50,
        "ApplicationRight": 0x1008FF51,
        "Book": 0x1008FF52,
        "CD": 0x1008FF53,
        "Calculater": 0x1008FF54,
        "Clear": 0x1008FF55,
        "Close": 0x1008FF56,
        "Copy": 0x1008FF57,
        "Cut": 0x1008FF58,
        "Display": 0x1008FF59,
        "DOS": 0x1008FF5A,
        "Documents": 0x1008FF5B,
        "Excel": 0x1008FF5C,
        "Explorer": 0x1008FF5D,
        "Game": 0x1008FF5E,
        "Go": 0x1008FF5F,
        "iTouch": 0x1008FF60,
        "LogOff": 0x1008FF61,
        "Market": 0x1008FF62,
        "Meeting": 0x1008FF63,
        "MenuKB": 0x1008FF65,
        "MenuPB": 0x1008FF66,
        "MySites": 0x1008FF67,
        "New": 0x1008FF68,
        "News": 0x1008FF69,
        "OfficeHome": 0x1008FF6A,
        "Open": 0x1008FF6B,
        "Option": 0x1008FF6C,
        "Paste": 0x1008FF6D,
        "Phone": 0x1008FF6E,
        "Q": 0x1008FF70,
        "Reply": 0x1008FF72,
        "Reload": 0x1008FF73,
        "RotateWindows": 0x1008FF74,
        "RotationPB": 0x1008FF75,
        "RotationKB": 0x1008FF76,
        "Save": 0x1008FF77,
        "ScrollUp": 0x1008FF78,
        "ScrollDown": 0x1008FF79,
        "ScrollClick": 0x1008FF7A,
        "Send": 0x1008FF7B,
        "Spell": 0x1008FF7C,
        "SplitScreen": 0x1008FF7D,
        "Support": 0x1008FF7E,
        "TaskPane": 0x1008FF7F,
        "Terminal": 0x1008FF80,
        "Tools": 0x1008FF81,
        "Travel": 0x1008FF82,
        "UserPB": 0x1008FF84,
        "User1KB": 0x1008FF85,
        "User2KB": 0x1008FF86,
        "Video": 0x1008FF87,
        "WheelButton": 0x1008FF88,
        "Word": 0x1008FF89,
        "Xfer": 0x1008FF8A,
        "ZoomIn": 0x1008FF8B,
        "ZoomOut": 0x1008FF8C,
        "Away": 0x1008FF8D,
        "Messenger": 0x1008FF8E,
        "WebCam": 0x1008FF8F,
        "MailForward": 0x1008FF90,
        "Pictures": 0x1008FF91,
        "Music": 0x1008FF92,
        "Battery": 0x1008FF93,
        "Bluetooth": 0x1008FF94,
        "WLAN": 0x1008FF95,
        "UWB": 0x1008FF96,
        "AudioForward": 0x1008FF97,
        "AudioRepeat": 0x1008FF98,
        "AudioRandomPlay": 0x1008FF99,
        "Subtitle": 0x1008FF9A,
        "AudioCycleTrack": 0x1008FF9B,
        "CycleAngle": 0x1008FF9C,
        "FrameBack": 0x1008FF9D,
        "FrameForward": 0x1008FF9E,
        "Time": 0x1008FF9F,
        "Select": 0x1008FFA0,
        "View": 0x1008FFA1,
        "TopMenu": 0x1008FFA2,
        "Red": 0x1008FFA3,
        "Green": 0x1008FFA4,
        "Yellow": 0x1008FFA5,
        "Blue": 0x1008FFA6,
        "Suspend": 0x1008FFA7,
        "Hibernate": 0x1008FFA8,
        "TouchpadToggle": 0x1008FFA9,
        "TouchpadOn": 0x1008FFB0,
        "TouchpadOff": 0x1008FFB1,
        "AudioMicMute": 0x1008FFB2,
        "Keyboard": 0x1008FFB3,
        "WWAN": 0x1008FFB4,
        "RFKill": 0x1008FFB5,
        "AudioPreset": 0x1008FFB6,
        "RotationLockToggle": 0x1008FFB7,
        "FullScreen": 0x1008FFB8,
        "Ungrab": 0x1008FE20,
        "ClearGrab": 0x1008FE21,
        "Next_VMode": 0x1008FE22,
        "Prev_VMode": 0x1008FE23,
        "LogWindowTree": 0x1008FE24,
        "LogGrabInfo": 0x1008FE25,
    }
    # Launch0-LaunchF
    for offset in range(16):
        vendor[f"Launch{offset:X}"] = 0x1008FF40 + offset
    for number in range(1, 13):
        vendor[f"Switch_VT_{number}"] = 0x1008FE00 + number
    for name, code in vendor.items():
        table[f"XF86{name}"] = code

    return table


KEYSYMS: Dict[str, int] = _build_keysyms()


def into_keysym(name: str) -> Optional[int]:
    """
    Look up the keysym code for a key name.

    Args:
        name: Textual key name, case-sensitive (e.g. "Return", "q", "F1")

    Returns:
        Keysym code, or None when the name has no mapping
    """
    return KEYSYMS.get(name)


def into_mod(name: str) -> Optional[int]:
    """
    Look up the modifier mask for a modifier name.

    The placeholders "modkey" and "mousekey" are not in this table.

    Args:
        name: Modifier name, case-sensitive (e.g. "Shift", "Mod4")

    Returns:
        Modifier mask, or None when the name has no mapping
    """
    return MODIFIERS.get(name)


def is_placeholder(modifier: str) -> bool:
    """Return True for modifiers resolved by the window manager at bind time."""
    return modifier in PLACEHOLDER_MODIFIERS


def key_names() -> List[str]:
    """All known key names, sorted."""
    return sorted(KEYSYMS)


def modifier_names() -> List[str]:
    """All known modifier names, excluding the "None" sentinel."""
    return [name for name in MODIFIERS if name != NO_MODIFIER]
