import pytest

from boggleht.boggle import boggle, format_board, gen_board, main, parse_dict, print_board


def _dict_file(tmp_path, words):
    path = tmp_path / "dict.txt"
    path.write_text("\n".join(words) + "\n")
    return path


def test_gen_board_shape_and_letters():
    board = gen_board(7, 42)
    assert len(board) == 7
    assert all(len(row) == 7 for row in board)
    assert all(len(ch) == 1 and "A" <= ch <= "Z" for row in board for ch in row)


def test_gen_board_is_deterministic_for_seed():
    first = gen_board(3, 5489)
    second = gen_board(3, 5489)
    assert first[0][0] == "W"
    assert second[0][0] == "W"
    assert len(first) == 3
    assert all(len(row) == 3 for row in first)
    assert first == second


def test_gen_board_first_letter_default_seed():
    assert gen_board(1, 5489) == [["W"]]


def test_gen_board_zero_size():
    assert gen_board(0, 1) == []


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_print_board(capsys):
    print_board([["Q"]])
    assert capsys.readouterr().out == " Q\n"


def test_parse_dict_words_and_prefixes(tmp_path):
    path = _dict_file(tmp_path, ["CAT", "A"])
    words, prefixes = parse_dict(path)
    assert words == {"CAT", "A"}
    assert prefixes == {"", "C", "CA"}


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(tmp_path / "missing.txt")


def test_boggle_keeps_longest_word_on_path(tmp_path):
    words, prefixes = parse_dict(_dict_file(tmp_path, ["CA", "CAT"]))
    board = [["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]]
    assert boggle(words, prefixes, board) == {"CAT"}


def test_boggle_path_stops_at_dead_end(tmp_path):
    words, prefixes = parse_dict(_dict_file(tmp_path, ["AB", "ABCD"]))
    board = [
        ["A", "B", "X", "D"],
        ["Z", "Z", "Z", "Z"],
        ["Z", "Z", "Z", "Z"],
        ["Z", "Z", "Z", "Z"],
    ]
    assert boggle(words, prefixes, board) == {"AB"}


def test_boggle_vertical_and_diagonal(tmp_path):
    words, prefixes = parse_dict(_dict_file(tmp_path, ["DOG", "DIG"]))
    board = [["D", "X", "X"], ["O", "I", "X"], ["G", "X", "G"]]
    assert boggle(words, prefixes, board) == {"DOG", "DIG"}


def test_boggle_results_are_dictionary_words(tmp_path):
    words, prefixes = parse_dict(
        _dict_file(tmp_path, ["A", "E", "AT", "TEA", "EAT", "NO", "ON", "I"])
    )
    found = boggle(words, prefixes, gen_board(8, 7))
    assert found <= words


def test_main_usage(capsys):
    assert main(["3", "1"]) == 1
    assert capsys.readouterr().out.startswith("Usage: boggle-driver")


def test_main_output(tmp_path, capsys):
    path = _dict_file(tmp_path, ["A", "E", "I", "O", "AT", "EAT"])
    assert main(["6", "11", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    board = gen_board(6, 11)
    assert "\n".join(lines[:6]) + "\n" == format_board(board)
    words, prefixes = parse_dict(path)
    found = boggle(words, prefixes, board)
    assert lines[6] == f"Found {len(found)} words:"
    assert lines[7] == ", ".join(sorted(found))


def test_main_missing_dictionary(tmp_path, capsys):
    assert main(["2", "1", str(tmp_path / "none.txt")]) == 1
    assert "unable to open dictionary file" in capsys.readouterr().err