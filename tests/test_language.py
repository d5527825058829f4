from chamber_chat.intelligence.language import ScriptVerdict, detect_script


def test_detect_script_bengali_is_secondary() -> None:
    assert detect_script("আপনার চেম্বার কোথায় আছে?") is ScriptVerdict.SECONDARY


def test_detect_script_ascii_is_default() -> None:
    assert detect_script("Where is your chamber?") is ScriptVerdict.DEFAULT
    assert detect_script("12345 !?") is ScriptVerdict.DEFAULT


def test_detect_script_empty_is_default() -> None:
    assert detect_script("") is ScriptVerdict.DEFAULT


def test_detect_script_single_bengali_char_in_mixed_text_wins() -> None:
    assert detect_script("hello doctor, I need help with my chest pain ক") is ScriptVerdict.SECONDARY


def test_detect_script_block_boundaries() -> None:
    assert detect_script("\u0980") is ScriptVerdict.SECONDARY
    assert detect_script("\u09ff") is ScriptVerdict.SECONDARY
    assert detect_script("\u097f") is ScriptVerdict.DEFAULT
    assert detect_script("\u0a00") is ScriptVerdict.DEFAULT


def test_detect_script_other_scripts_are_default() -> None:
    assert detect_script("नमस्ते") is ScriptVerdict.DEFAULT
    assert detect_script("你好") is ScriptVerdict.DEFAULT
    assert detect_script("নমস্কার") is ScriptVerdict.SECONDARY
