import io

import pytest

from memfit.cli import main, run
from memfit.memory import Block, Strategy

RULE = "-------------------------------------------"


def _run(strategy, text):
    out = io.StringIO()
    memory = run(strategy, io.StringIO(text), out)
    return memory, out.getvalue()


def test_exit_only_prints_header_and_footer():
    memory, output = _run(Strategy.FIRST, "5\n")
    assert output.startswith(f"{RULE}\nMax Size: 500\n")
    assert output.endswith(RULE)
    assert memory.free_size == 500


def test_end_of_input_stops_loop():
    memory, output = _run(Strategy.FIRST, "")
    assert output.endswith(RULE)
    assert len(memory.blocks) == 1


@pytest.mark.parametrize(
    "strategy, label",
    [(Strategy.FIRST, "First fit"), (Strategy.BEST, "Best fit"), (Strategy.WORST, "Worst fit")],
)
def test_menu_names_strategy(strategy, label):
    _, output = _run(strategy, "5\n")
    assert f"1) {label} \n" in output


def test_allocate_first_fit():
    memory, output = _run(Strategy.FIRST, "1\nA\n100\n5\n")
    assert "Memory allocated to PID: A successfully!" in output
    assert memory.blocks[0] == Block("A", 100, 0)
    assert sum(block.size for block in memory.blocks) == 500


def test_tokens_may_share_a_line():
    memory, _ = _run("first", "1 A 100 1 B 50 5")
    assert [block.pid for block in memory.blocks if not block.is_free] == ["A", "B"]


def test_best_fit_chooses_smallest_hole():
    text = "1 A 200\n1 B 50\n1 C 100\n2 A\n1 X 120\n5\n"
    memory, _ = _run(Strategy.BEST, text)
    blocks = {block.pid: block for block in memory.blocks if not block.is_free}
    assert blocks["X"].start == blocks["C"].end


def test_worst_fit_chooses_largest_hole():
    text = "1 A 100\n1 B 50\n2 A\n1 X 80\n5\n"
    memory, _ = _run(Strategy.WORST, text)
    blocks = {block.pid: block for block in memory.blocks if not block.is_free}
    assert blocks["X"].start == blocks["B"].end


def test_first_fit_chooses_lowest_hole():
    text = "1 A 100\n1 B 50\n2 A\n1 X 80\n5\n"
    memory, _ = _run(Strategy.FIRST, text)
    blocks = {block.pid: block for block in memory.blocks if not block.is_free}
    assert blocks["X"].start == 0


def test_not_enough_space():
    memory, output = _run(Strategy.FIRST, "1 A 600\n5\n")
    assert "Not enough space!" in output
    assert memory.free_size == 500


def test_need_compaction():
    text = "1 A 200\n1 B 100\n1 C 200\n2 A\n2 C\n1 D 300\n5\n"
    memory, output = _run(Strategy.BEST, text)
    assert "Need to do Compaction!" in output
    assert all(block.pid != "D" for block in memory.blocks)


def test_deallocate_unknown_program():
    _, output = _run(Strategy.FIRST, "2 Z\n5\n")
    assert "No such Program exists!" in output


def test_deallocate_reports_success():
    memory, output = _run(Strategy.FIRST, "1 A 100\n2 A\n5\n")
    assert "Memory deallocated successfully!" in output
    assert memory.free_size == 500
    assert len(memory.blocks) == 1


def test_compaction_gathers_free_space():
    text = "1 A 100\n1 B 100\n2 A\n3\n5\n"
    memory, output = _run(Strategy.FIRST, text)
    assert "Compaction done successfully!" in output
    assert memory.blocks[0].pid == "B"
    assert memory.blocks[0].start == 0
    assert memory.blocks[-1].is_free
    assert memory.blocks[-1].size == memory.free_size


def test_compaction_when_full():
    _, output = _run(Strategy.FIRST, "1 A 500\n3\n5\n")
    assert "Memory is full!" in output


def test_display_prints_map():
    memory, output = _run(Strategy.FIRST, "1 A 100\n4\n5\n")
    assert f"\n{memory.render()}\n\n" in output


def test_invalid_choice():
    _, output = _run(Strategy.FIRST, "9\n5\n")
    assert "Invalid Input!" in output


def test_invalid_size():
    memory, output = _run(Strategy.FIRST, "1 A abc\n5\n")
    assert "Invalid Input!" in output
    assert memory.free_size == 500


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 A 100\n5\n"))
    assert main(["best"]) == 0
    output = capsys.readouterr().out
    assert "1) Best fit" in output
    assert "Memory allocated to PID: A successfully!" in output


def test_main_rejects_unknown_strategy():
    with pytest.raises(SystemExit):
        main(["nearest"])