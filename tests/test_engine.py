"""
Testing pure game logic: cell colours and win detection.
"""

from equatle.engine import is_correct, new_grid, score
from equatle.row import Answer, Row
from equatle.types import CellStatus, Operator

G = CellStatus.GREEN
Y = CellStatus.YELLOW
X = CellStatus.GRAY
U = CellStatus.UNGUESSED


def test_new_grid_is_six_rows_of_unguessed():
    grid = new_grid()
    assert len(grid) == 6
    for statuses in grid:
        assert statuses == (U, U, U, U, U, U)


def test_exact_match_is_all_green():
    answer = Answer(5, Operator.ADD, 5, 10)
    guess = Row(5, Operator.ADD, 5, 10)

    grid = score(new_grid(), 0, guess, answer)

    assert grid[0] == (G, G, G, U, G, G)


def test_no_shared_characters_is_all_gray():
    answer = Answer(9, Operator.SUBTRACT, 9, 0)
    guess = Row(2, Operator.ADD, 2, 4)

    grid = score(new_grid(), 0, guess, answer)

    # both results are single digits, so column 5 is blank on both sides
    assert grid[0][:5] == (X, X, X, U, X)


def test_two_digit_guess_with_no_shared_characters():
    answer = Answer(9, Operator.SUBTRACT, 8, 1)
    guess = Row(2, Operator.ADD, 2, 40)

    grid = score(new_grid(), 0, guess, answer)

    assert grid[0] == (X, X, X, U, X, X)


def test_matched_digit_is_not_credited_twice():
    answer = Answer(5, Operator.SUBTRACT, 4, 1)
    guess = Row(5, Operator.ADD, 5, 10)

    grid = score(new_grid(), 0, guess, answer)

    # column 0 uses up the answer's only "5", so column 2 gets nothing
    assert grid[0] == (G, X, X, U, G, X)


def test_yellow_for_characters_in_other_columns():
    answer = Answer(8, Operator.DIVIDE, 4, 2)
    guess = Row(4, Operator.MULTIPLY, 2, 8)

    grid = score(new_grid(), 0, guess, answer)

    # 4, 2 and 8 are all in the answer, just elsewhere; both column 5s are blank
    assert grid[0] == (Y, X, Y, U, Y, G)


def test_green_consumes_before_yellow_looks():
    answer = Answer(2, Operator.MULTIPLY, 3, 6)
    guess = Row(3, Operator.ADD, 3, 6)

    grid = score(new_grid(), 0, guess, answer)

    # the answer's single "3" is matched green in column 2; column 0 stays gray
    assert grid[0] == (X, X, G, U, G, G)


def test_single_digit_answer_never_matches_a_second_result_digit():
    answer = Answer(9, Operator.SUBTRACT, 2, 7)
    guess = Row(9, Operator.ADD, 9, 18)

    grid = score(new_grid(), 0, guess, answer)

    # column 5 "8" has nothing to match: the answer's column 5 is blank
    assert grid[0] == (G, X, X, U, X, X)


def test_digit_in_answer_result_can_be_yellow():
    answer = Answer(9, Operator.SUBTRACT, 2, 7)
    guess = Row(7, Operator.ADD, 2, 9)

    grid = score(new_grid(), 0, guess, answer)

    assert grid[0] == (Y, X, G, U, Y, G)


def test_score_does_not_mutate_and_shares_untouched_rows():
    answer = Answer(2, Operator.ADD, 3, 5)
    previous = new_grid()
    before = [tuple(statuses) for statuses in previous]

    grid = score(previous, 2, Row(2, Operator.ADD, 3, 5), answer)

    assert [tuple(statuses) for statuses in previous] == before
    assert grid is not previous
    for index in (0, 1, 3, 4, 5):
        assert grid[index] is previous[index]
    assert grid[2] == (G, G, G, U, G, G)


def test_score_is_idempotent():
    answer = Answer(9, Operator.SUBTRACT, 4, 5)
    guess = Row(4, Operator.ADD, 4, 8)
    previous = new_grid()

    first = score(previous, 1, guess, answer)
    second = score(previous, 1, guess, answer)

    assert first == second
    assert first[1] == (X, X, G, U, X, G)


def test_score_accepts_list_grids():
    answer = Answer(2, Operator.ADD, 3, 5)
    previous = [[U] * 6 for _ in range(6)]

    grid = score(previous, 0, Row(3, Operator.ADD, 2, 5), answer)

    assert grid[0] == (Y, G, Y, U, G, G)
    assert previous[0] == [U] * 6
    assert grid[1] is previous[1]


def test_score_ignores_row_index_outside_grid():
    answer = Answer(2, Operator.ADD, 3, 5)
    previous = new_grid()

    grid = score(previous, 6, Row(2, Operator.ADD, 3, 5), answer)

    assert grid == previous


def test_earlier_rows_keep_their_colours():
    answer = Answer(2, Operator.ADD, 3, 5)
    first = score(new_grid(), 0, Row(9, Operator.SUBTRACT, 4, 5), answer)
    second = score(first, 1, Row(2, Operator.ADD, 3, 5), answer)

    assert second[0] is first[0]
    assert second[0] == (X, X, X, U, G, G)
    assert second[1] == (G, G, G, U, G, G)


def test_is_correct_true_and_false():
    answer = Answer(5, Operator.ADD, 5, 10)
    assert is_correct(Row(5, Operator.ADD, 5, 10), answer) is True
    assert is_correct(Row(5, Operator.ADD, 5, 1), answer) is False
    assert is_correct(Row(2, Operator.MULTIPLY, 5, 10), answer) is False
