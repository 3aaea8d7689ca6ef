"""
Unit tests for Cell class.

Tests cell state transitions, views and observation conversion.
"""
import dataclasses

import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not be a mine by default."""
        assert hidden_cell.is_mine is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self, hidden_cell: Cell) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert hidden_cell.adjacent_mines == 0

    def test_cell_is_immutable(self, hidden_cell: Cell) -> None:
        """Cells cannot be changed in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            hidden_cell.state = CellState.REVEALED

    def test_with_state_returns_new_cell(self, mine_cell: Cell) -> None:
        """with_state should copy content into a new cell."""
        flagged = mine_cell.with_state(CellState.FLAGGED)
        assert flagged.is_flagged is True
        assert flagged.is_mine is True
        assert mine_cell.is_hidden is True


# ============================================================================
# Mark Cycle Tests
# ============================================================================

class TestMarkCycle:
    """Test the hidden -> flagged -> questioned -> hidden cycle."""

    def test_hidden_goes_to_flagged(self, hidden_cell: Cell) -> None:
        """Hidden cell should mark as flagged."""
        assert hidden_cell.next_mark() == CellState.FLAGGED

    def test_flagged_goes_to_questioned(self) -> None:
        """Flagged cell should mark as questioned."""
        cell = Cell(state=CellState.FLAGGED)
        assert cell.next_mark() == CellState.QUESTIONED

    def test_questioned_goes_to_hidden(self) -> None:
        """Questioned cell should return to hidden."""
        cell = Cell(state=CellState.QUESTIONED)
        assert cell.next_mark() == CellState.HIDDEN

    def test_revealed_cannot_be_marked(self) -> None:
        """Revealed cell should have no next mark."""
        cell = Cell(state=CellState.REVEALED)
        assert cell.next_mark() is None

    def test_states_are_exclusive(self) -> None:
        """Exactly one state predicate holds for any cell."""
        for state in CellState:
            cell = Cell(state=state)
            flags = [
                cell.is_hidden,
                cell.is_revealed,
                cell.is_flagged,
                cell.is_questioned,
            ]
            assert flags.count(True) == 1


# ============================================================================
# View and Observation Tests
# ============================================================================

class TestCellView:
    """Test what a player can see of a cell."""

    def test_hidden_mine_does_not_leak(self, mine_cell: Cell) -> None:
        """Hidden cell view should not expose a mine."""
        view = mine_cell.view()
        assert view.state == CellState.HIDDEN
        assert view.is_mine is False
        assert view.hint is None

    def test_revealed_number_shows_hint(self) -> None:
        """Revealed safe cell should show its hint."""
        view = Cell(adjacent_mines=3, state=CellState.REVEALED).view()
        assert view.hint == 3
        assert view.is_mine is False

    def test_revealed_mine_shows_mine(self) -> None:
        """Revealed mine should show as a mine."""
        view = Cell(is_mine=True, state=CellState.REVEALED).view()
        assert view.is_mine is True
        assert view.hint is None


class TestCellObservation:
    """Test observation conversion."""

    def test_hidden_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_observation(self) -> None:
        assert Cell(state=CellState.FLAGGED).to_observation() == -2

    def test_questioned_observation(self) -> None:
        assert Cell(state=CellState.QUESTIONED).to_observation() == -3

    def test_revealed_number_observation(self) -> None:
        cell = Cell(adjacent_mines=5, state=CellState.REVEALED)
        assert cell.to_observation() == 5

    def test_revealed_mine_observation(self) -> None:
        cell = Cell(is_mine=True, state=CellState.REVEALED)
        assert cell.to_observation() == 9
