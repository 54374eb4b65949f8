"""
Tests for Day 5 (Supply Stacks) and Day 6 (Tuning Trouble)
"""

import pytest

from aoc_core.exceptions import InputFormatError, SimulationError
from aoc_core.solvers.supply_stacks import (
    Crane,
    CrateMover,
    Move,
    Storage,
    SupplyStacksSolver,
)
from aoc_core.solvers.tuning_trouble import (
    MarkerKind,
    TuningTroubleSolver,
    chars_before_marker,
)


@pytest.fixture
def plan():
    """例題の初期配置と手順"""
    solver = SupplyStacksSolver()
    return solver.parse(solver.example)


class TestMove:
    """手順の解析テスト"""

    def test_parse(self) -> None:
        """"move N from A to B" の解析"""
        assert Move.parse("move 6 from 5 to 7") == Move(6, 5, 7)

    @pytest.mark.parametrize("line, message", [
        ("move 1 form 2 to 1", "unexpected keyword 'form'"),
        ("move x from 1 to 2", "must be integers"),
        ("move 1 from 2", "badly formatted"),
        ("", "badly formatted"),
        ("move -2 from 1 to 3", "must not be negative"),
        ("move 1 from 0 to 3", "stack numbers start at 1"),
        ("move 1 from 1 to -3", "stack numbers start at 1"),
    ])
    def test_invalid_move(self, line: str, message: str) -> None:
        """不正な手順でエラー"""
        with pytest.raises(InputFormatError, match=message):
            Move.parse(line)


class TestStorage:
    """積荷の図の解析テスト"""

    def test_parse_example(self, plan) -> None:
        """スタックは下から上の順"""
        assert plan.storage.stacks == [["Z", "N"], ["M", "C", "D"], ["P"]]
        assert plan.storage.top_crates_sequence() == "NDP"

    def test_get_stack_out_of_range(self, plan) -> None:
        """範囲外のスタックはNone"""
        assert plan.storage.get_stack(0) is None
        assert plan.storage.get_stack(4) is None
        assert plan.storage.get_stack(3) == ["P"]

    def test_empty_stack_on_top_sequence(self) -> None:
        """空のスタックは空白"""
        assert Storage([["A"], [], ["B", "C"]]).top_crates_sequence() == "A C"

    def test_copy_is_independent(self, plan) -> None:
        """複製への変更は元に影響しない"""
        copied = plan.storage.copy()
        copied.stacks[0].append("X")
        assert plan.storage.stacks[0] == ["Z", "N"]

    def test_badly_drawn_crate(self) -> None:
        """'[X]' でないクレートでエラー"""
        with pytest.raises(InputFormatError, match=r"\[X\]"):
            Storage.parse("(A)\n 1 ")

    def test_missing_numbering(self) -> None:
        """番号行がなければエラー"""
        with pytest.raises(InputFormatError, match="storage size"):
            Storage.parse("[A]")


class TestCrane:
    """クレーンのシミュレーションテスト"""

    def test_cratemover_9000_reverses_order(self) -> None:
        """1個ずつ移動すると順序が反転する"""
        storage = Storage([["A", "B", "C"], []])
        Crane(CrateMover.CRATEMOVER_9000, storage, [Move(3, 1, 2)]).execute_procedure()
        assert storage.stacks == [[], ["C", "B", "A"]]

    def test_cratemover_9001_keeps_order(self) -> None:
        """まとめて移動すると順序を保つ"""
        storage = Storage([["A", "B", "C"], []])
        Crane(CrateMover.CRATEMOVER_9001, storage, [Move(3, 1, 2)]).execute_procedure()
        assert storage.stacks == [[], ["A", "B", "C"]]

    def test_missing_origin_stack(self) -> None:
        """存在しない移動元でエラー"""
        crane = Crane(CrateMover.CRATEMOVER_9000, Storage([["A"]]), [Move(1, 4, 1)])
        with pytest.raises(SimulationError, match="step 1: required origin stack 4"):
            crane.execute_procedure()

    def test_missing_destination_stack(self) -> None:
        """存在しない移動先でエラー"""
        crane = Crane(CrateMover.CRATEMOVER_9000, Storage([["A"]]), [Move(1, 1, 2)])
        with pytest.raises(SimulationError, match="destination stack 2"):
            crane.execute_procedure()

    def test_not_enough_crates(self) -> None:
        """クレート数が足りなければエラー"""
        procedure = [Move(1, 1, 2), Move(2, 1, 2)]
        crane = Crane(CrateMover.CRATEMOVER_9001, Storage([["A", "B"], []]), procedure)
        with pytest.raises(SimulationError, match="step 2: cannot move 2 crates"):
            crane.execute_procedure()


class TestSupplyStacks:
    """Day 5のテスト"""

    def test_example(self) -> None:
        """例題: Part 1はCMZ、Part 2はMCD"""
        solver = SupplyStacksSolver()
        assert solver.solve(solver.example) == ("CMZ", "MCD")

    def test_parts_start_from_initial_storage(self, plan) -> None:
        """各パートは初期配置から並べ替える"""
        solver = SupplyStacksSolver()
        assert solver.part_one(plan) == "CMZ"
        assert solver.part_two(plan) == "MCD"
        assert plan.storage.top_crates_sequence() == "NDP"

    def test_missing_blank_line(self) -> None:
        """図と手順の区切りがなければエラー"""
        with pytest.raises(InputFormatError, match="separated by a blank line"):
            SupplyStacksSolver().parse("[A]\n 1 \nmove 1 from 1 to 1\n")

    def test_negative_move_is_rejected(self) -> None:
        """負の移動数は無視されずにエラー"""
        text = SupplyStacksSolver.example + "move -2 from 1 to 3\n"
        with pytest.raises(InputFormatError, match="line 10: number of crates"):
            SupplyStacksSolver().solve(text)

    def test_move_error_reports_input_line(self, plan) -> None:
        """手順のエラーは入力全体での行番号"""
        text = SupplyStacksSolver.example + "move one from 1 to 2\n"
        with pytest.raises(InputFormatError, match="line 10"):
            SupplyStacksSolver().parse(text)


class TestTuningTrouble:
    """Day 6のテスト"""

    @pytest.mark.parametrize("stream, packet, message", [
        ("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 7, 19),
        ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
        ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
        ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
        ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
    ])
    def test_examples(self, stream: str, packet: int, message: int) -> None:
        """例題のマーカー位置"""
        assert TuningTroubleSolver().solve(stream + "\n") == (packet, message)

    def test_marker_at_start(self) -> None:
        """先頭でマーカーが完成する"""
        assert chars_before_marker("abcdaaaa", MarkerKind.PACKET) == 4

    def test_no_marker(self) -> None:
        """マーカーがなければNone"""
        assert chars_before_marker("abcabcabcabc", MarkerKind.PACKET) is None

    def test_stream_shorter_than_marker(self) -> None:
        """マーカーより短いストリーム"""
        assert chars_before_marker("abc", MarkerKind.PACKET) is None

    def test_empty_stream(self) -> None:
        """空のストリームでエラー"""
        with pytest.raises(InputFormatError, match="empty"):
            TuningTroubleSolver().parse("\n")

    def test_stream_with_spaces(self) -> None:
        """空白を含むストリームでエラー"""
        with pytest.raises(InputFormatError, match="single line"):
            TuningTroubleSolver().parse("abcd\nefgh\n")
