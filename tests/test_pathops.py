import pytest

from npquickopen.pathops import (
    file_names_text,
    full_paths_text,
    new_instance_args,
    prompt_directory,
    relative_paths_text,
    script_first_line,
    split_rename_target,
    supports_scripts,
)

FIRST_LINE = "//Explorer: NppExec.dll EXP_FULL_PATH[0]"


def test_full_paths_joined_by_newline():
    paths = ["C:\\a\\one.txt", "C:\\a\\two.txt"]
    text = full_paths_text(paths)
    assert text.split("\n") == paths


def test_full_paths_single():
    assert full_paths_text(["C:\\x.c"]) == "C:\\x.c"


def test_file_names_of_files():
    assert file_names_text(["C:\\dir\\a.txt", "C:\\dir\\b.txt"]) == "a.txt\nb.txt"


def test_file_names_of_folder_keeps_leading_separator():
    assert file_names_text(["C:\\dir\\sub\\"]) == "\\sub"


def test_file_names_skip_paths_without_separator():
    assert file_names_text(["plain", "C:\\x\\y.c"]) == "y.c"


def test_file_names_drive_root_unchanged():
    assert file_names_text(["C:\\"]) == "C:\\"


def test_relative_paths_below_base():
    assert relative_paths_text(["C:\\work\\src\\main.c"], "C:\\work") == ".\\src\\main.c"


def test_relative_paths_above_base():
    result = relative_paths_text(["C:\\work\\other\\f.txt"], "C:\\work\\src")
    assert result.startswith("..\\")
    assert result.endswith("other\\f.txt")


def test_relative_paths_case_insensitive():
    result = relative_paths_text(["c:\\WORK\\f.txt"], "C:\\work")
    assert result.endswith("f.txt")
    assert result.startswith(".\\")


def test_relative_paths_line_count():
    paths = ["C:\\w\\a", "C:\\w\\b", "C:\\w\\c"]
    assert len(relative_paths_text(paths, "C:\\w").split("\n")) == len(paths)


def test_relative_paths_other_drive_keeps_full_path():
    assert relative_paths_text(["D:\\x.txt"], "C:\\w") == "D:\\x.txt"


def test_relative_paths_without_base():
    assert relative_paths_text(["C:\\w\\a"], "") is None


def test_prompt_directory_of_file():
    assert prompt_directory("C:\\dir\\file.txt") == "C:\\dir"


def test_prompt_directory_of_folder():
    assert prompt_directory("C:\\dir\\") == "C:\\dir\\"


def test_prompt_directory_empty():
    with pytest.raises(ValueError):
        prompt_directory("")


def test_new_instance_args():
    args = new_instance_args(["C:\\a.txt", "C:\\b c.txt"])
    assert args == '-multiInst "C:\\a.txt" "C:\\b c.txt"'


def test_new_instance_args_empty():
    assert new_instance_args([]) == ""


def test_split_rename_target_file():
    assert split_rename_target("C:\\dir\\old.txt") == ("C:\\dir\\", "old.txt")


def test_split_rename_target_folder_round_trip():
    parent, name = split_rename_target("C:\\dir\\sub\\")
    assert name == "sub"
    assert parent + name + "\\" == "C:\\dir\\sub\\"


def test_split_rename_target_without_separator():
    with pytest.raises(ValueError):
        split_rename_target("name")


def test_script_first_line_utf16_with_bom():
    body = FIRST_LINE + "\r\n" + "cd $(ARGV[1])"
    data = b"\xff\xfe" + body.encode("utf-16-le")
    assert script_first_line(data) == FIRST_LINE + "\r"


def test_script_first_line_utf16_without_bom():
    data = (FIRST_LINE + "\n" + "cd $(ARGV[1])").encode("utf-16-le")
    assert script_first_line(data) == FIRST_LINE


def test_script_first_line_ansi():
    data = (FIRST_LINE + "\n" + "cd $(ARGV[1])").encode("ascii")
    assert script_first_line(data) == FIRST_LINE


def test_script_first_line_wrong_format():
    with pytest.raises(ValueError):
        script_first_line(b"cd somewhere\n")


def test_supports_scripts_threshold():
    assert supports_scripts(0x02F5) is True
    assert supports_scripts(0x02F1) is False
    assert supports_scripts(0) is False