"""Tests for seam search and removal."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarve.energy import cumulative_energy, energy_maps
from seamcarve.seam import seam_start, find_seam, remove_seam

from conftest import make_column_index_pixels, make_uniform_pixels


class TestSeamStart:
    def test_picks_leftmost_minimum(self):
        """Single row [5, 1, 3, 1, 4]: columns 1 and 3 tie, 1 wins."""
        energies = cumulative_energy(torch.tensor([[5.0, 1.0, 3.0, 1.0, 4.0]]))
        assert seam_start(energies) == 1

    def test_all_equal_picks_first_column(self):
        assert seam_start(torch.zeros(3, 6)) == 0

    def test_uses_last_row(self):
        energies = torch.tensor([[0.0, 9.0, 9.0],
                                 [9.0, 9.0, 0.5]])
        assert seam_start(energies) == 2


class TestFindSeam:
    def test_follows_zero_energy_column(self):
        """Given energy that is zero in one column, the seam goes there."""
        H, W = 20, 20
        gradient = torch.ones(H, W)
        gradient[:, 10] = 0.0
        seam = find_seam(cumulative_energy(gradient))
        assert (seam == 10).all(), f"Expected all 10, got {seam.tolist()}"

    def test_follows_diagonal_valley(self):
        """Seam should follow a diagonal zero-energy path."""
        H, W = 15, 20
        gradient = torch.ones(H, W) * 10.0
        for i in range(H):
            gradient[i, 3 + i] = 0.0
        seam = find_seam(cumulative_energy(gradient))
        for i in range(H):
            assert seam[i].item() == 3 + i, f"Row {i}: got {seam[i]}, expected {3 + i}"

    def test_zero_field_removes_first_column(self):
        seam = find_seam(torch.zeros(5, 4))
        assert seam.tolist() == [0, 0, 0, 0, 0]

    def test_ties_keep_current_column(self):
        """Neighbors only win when strictly smaller than the current column."""
        energies = torch.tensor([[1.0, 1.0, 1.0],
                                 [5.0, 0.0, 5.0]])
        assert find_seam(energies).tolist() == [1, 1]

    def test_left_move_is_final(self):
        """Once the seam steps left, a cheaper right neighbor is not considered."""
        energies = torch.tensor([[2.0, 3.0, 1.0],
                                 [5.0, 0.0, 5.0]])
        assert find_seam(energies).tolist() == [0, 1]

    def test_both_neighbors_below_center(self):
        """Left and right both beat the center: left is checked first and kept,
        even though right is lower."""
        energies = torch.tensor([[9.0, 1.0, 5.0, 0.5],
                                 [4.0, 2.0, 0.0, 4.0],
                                 [9.0, 9.0, 1.0, 9.0]])
        assert find_seam(energies).tolist() == [1, 2, 2]

    def test_right_wins_when_left_does_not(self):
        energies = torch.tensor([[4.0, 3.0, 1.0],
                                 [5.0, 0.0, 5.0]])
        assert find_seam(energies).tolist() == [2, 1]

    def test_left_wins_equal_left_right(self):
        """Left and right tie below the center: left is seen first."""
        energies = torch.tensor([[1.0, 3.0, 1.0],
                                 [5.0, 0.0, 5.0]])
        assert find_seam(energies).tolist() == [0, 1]

    def test_window_is_around_current_column(self):
        """The search never jumps more than one column per row."""
        energies = torch.tensor([[0.0, 9.0, 9.0, 9.0],
                                 [9.0, 9.0, 9.0, 0.0]])
        assert find_seam(energies).tolist() == [3, 3]

    def test_seam_continuity(self):
        """Adjacent seam indices must differ by at most 1."""
        torch.manual_seed(42)
        seam = find_seam(cumulative_energy(torch.rand(50, 40)))
        assert seam.shape == (50,)
        diffs = torch.abs(seam[1:] - seam[:-1])
        assert diffs.max() <= 1
        assert seam.min() >= 0 and seam.max() < 40

    def test_uniform_gray_removes_center_column(self):
        """Zero padding gives a flat 3x3 grid a bright border ring, so the
        cheapest seam runs straight down the middle."""
        _, _, energies = energy_maps(make_uniform_pixels(3, 3))
        assert find_seam(energies).tolist() == [1, 1, 1]

    def test_single_column_is_forced(self):
        seam = find_seam(cumulative_energy(torch.rand(6, 1)))
        assert seam.tolist() == [0] * 6


class TestRemoveSeam:
    def test_preserves_non_seam_pixels(self):
        """After removing a seam, remaining pixels keep their order."""
        H, W = 4, 10
        pixels = make_column_index_pixels(H, W)
        seam = torch.full((H,), 5, dtype=torch.long)
        carved = remove_seam(pixels, seam)

        assert carved.shape == (H, W - 1)
        assert (carved[0] & 0xFF).tolist() == [0, 1, 2, 3, 4, 6, 7, 8, 9]

    def test_with_varying_positions(self):
        """Seam that zigzags removes the correct pixel from each row."""
        pixels = make_column_index_pixels(3, 6)
        carved = remove_seam(pixels, torch.tensor([2, 3, 2]))

        assert (carved[0] & 0xFF).tolist() == [0, 1, 3, 4, 5]
        assert (carved[1] & 0xFF).tolist() == [0, 1, 2, 4, 5]
        assert (carved[2] & 0xFF).tolist() == [0, 1, 3, 4, 5]

    def test_edges(self):
        pixels = make_column_index_pixels(2, 4)
        carved = remove_seam(pixels, torch.tensor([0, 3]))
        assert (carved[0] & 0xFF).tolist() == [1, 2, 3]
        assert (carved[1] & 0xFF).tolist() == [0, 1, 2]

    def test_does_not_modify_input(self):
        pixels = make_column_index_pixels(3, 5)
        before = pixels.clone()
        remove_seam(pixels, torch.zeros(3, dtype=torch.long))
        assert torch.equal(pixels, before)

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            remove_seam(make_column_index_pixels(3, 5), torch.zeros(2, dtype=torch.long))
