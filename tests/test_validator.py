import pytest

from garden.engine.validator import Outcome, Violation, marked_cells, validate

SIZE = 6
# Region id == row: a valid layout only needs distinct rows/cols and no touching
ROW_REGIONS = [i // SIZE for i in range(SIZE * SIZE)]
# (0,1) (1,3) (2,5) (3,0) (4,2) (5,4)
SOLVED = [1, 9, 17, 18, 26, 34]

def cand(cells, size=SIZE):
    out = [False] * (size * size)
    for i in cells:
        out[i] = True
    return out

def test_valid_layout():
    got = validate(ROW_REGIONS, SIZE, 6, cand(SOLVED))
    assert got == Outcome.valid()
    assert got.ok and got.cells == ()

def test_wrong_count_five_marks():
    got = validate(ROW_REGIONS, SIZE, 6, cand(SOLVED[:5]))
    assert got.violation is Violation.WRONG_COUNT
    assert got.cells == tuple(SOLVED[:5])

def test_wrong_count_empty_and_too_many():
    assert validate(ROW_REGIONS, SIZE, 6, cand([])).violation is Violation.WRONG_COUNT
    assert validate(ROW_REGIONS, SIZE, 6, cand(SOLVED + [33])).violation is Violation.WRONG_COUNT

def test_count_checked_before_everything():
    # Five marks, all in row 0 and touching: still a count failure
    got = validate(ROW_REGIONS, SIZE, 6, cand([0, 1, 2, 3, 4]))
    assert got.violation is Violation.WRONG_COUNT

def test_row_conflict_before_adjacency():
    # 0 and 3 share row 0; 19 and 26 touch but are never reached
    got = validate(ROW_REGIONS, SIZE, 6, cand([0, 3, 17, 19, 26, 34]))
    assert got.violation is Violation.ROW_CONFLICT
    assert got.cells == (0, 3)

def test_neighbours_in_one_row_strict_is_adjacent():
    # Touching is checked for mark 0 before mark 1 is reached, so the shared row never is
    got = validate(ROW_REGIONS, SIZE, 6, cand([0, 1, 17, 18, 26, 34]))
    assert got.violation is Violation.ADJACENT
    assert got.cells == (0, 1)

def test_earlier_mark_touching_beats_later_row_repeat():
    # 24 and 26 share row 4, but mark 0 touches 7 before 26 is scanned
    got = validate(ROW_REGIONS, SIZE, 6, cand([0, 7, 17, 24, 26, 34]))
    assert got.violation is Violation.ADJACENT
    assert got.cells == (0, 7)

def test_neighbours_in_one_row_relaxed_is_adjacent():
    got = validate(ROW_REGIONS, SIZE, 6, cand([0, 1, 17, 18, 26, 34]), enforce_uniqueness=False)
    assert got.violation is Violation.ADJACENT
    assert got.cells == (0, 1)

def test_diagonal_touch_strict():
    # rows 0..5 and cols 0,1,5,2,4,3 all distinct; 0 and 7 touch diagonally
    got = validate(ROW_REGIONS, SIZE, 6, cand([0, 7, 17, 20, 28, 33]))
    assert got.violation is Violation.ADJACENT
    assert got.cells == (0, 7)

def test_column_conflict():
    got = validate(ROW_REGIONS, SIZE, 2, cand([0, 12]))
    assert got.violation is Violation.COLUMN_CONFLICT
    assert got.cells == (0, 12)

def test_region_conflict():
    flat = [0] * (SIZE * SIZE)
    got = validate(flat, SIZE, 2, cand([0, 14]))
    assert got.violation is Violation.REGION_CONFLICT
    assert got.cells == (0, 14)

def test_row_reported_before_column_and_region():
    # 0 and 2 share row and region; row wins
    flat = [0] * (SIZE * SIZE)
    assert validate(flat, SIZE, 2, cand([0, 2])).violation is Violation.ROW_CONFLICT

def test_seven_board_repeated_rows_relaxed_is_valid():
    size = 7
    regions = [0] * (size * size)
    marks = cand([0, 2, 4, 6, 14, 16, 18], size)
    assert validate(regions, size, 7, marks, enforce_uniqueness=False).ok
    # Default for 7 on 7 is strict
    got = validate(regions, size, 7, marks)
    assert got.violation is Violation.ROW_CONFLICT and got.cells == (0, 2)

def test_overflow_defaults_to_relaxed():
    # 7 markers on 6x6: rows repeat, only touching matters
    marks = cand([0, 2, 4, 12, 14, 16, 24])
    assert validate(ROW_REGIONS, SIZE, 7, marks).ok
    touching = cand([0, 2, 4, 12, 14, 16, 21])  # 21 = (3,3) touches 14 = (2,2)
    got = validate(ROW_REGIONS, SIZE, 7, touching)
    assert got.violation is Violation.ADJACENT and got.cells == (14, 21)

def test_does_not_mutate_candidate():
    marks = cand(SOLVED)
    before = list(marks)
    validate(ROW_REGIONS, SIZE, 6, marks)
    assert marks == before

def test_malformed_lengths():
    with pytest.raises(ValueError):
        validate(ROW_REGIONS, SIZE, 6, [False] * 35)
    with pytest.raises(ValueError):
        validate(ROW_REGIONS[:-1], SIZE, 6, cand(SOLVED))

def test_marked_cells():
    assert marked_cells([False, True, False, True]) == [1, 3]
