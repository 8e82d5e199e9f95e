import unittest

from game import Coord, Move, NULL_MOVE


def mv(text):
    return Move.parse(text)


class TestCoord(unittest.TestCase):
    def test_given_notation_when_parsing_then_zero_indexed_file_and_rank(self):
        self.assertEqual(Coord.from_notation('a1'), Coord(0, 0))
        self.assertEqual(Coord.from_notation('e2'), Coord(4, 1))
        self.assertEqual(Coord.from_notation('h8'), Coord(7, 7))

    def test_given_coord_when_rendering_then_notation_round_trips(self):
        for text in ('a1', 'd5', 'h8'):
            self.assertEqual(str(Coord.from_notation(text)), text)

    def test_given_malformed_square_when_parsing_then_value_error(self):
        for bad in ('', 'e', 'i2', 'e9', 'e0', 'E2', 'e22'):
            with self.assertRaises(ValueError):
                Coord.from_notation(bad)

    def test_given_offsets_when_leaving_board_then_on_board_false(self):
        a1 = Coord(0, 0)
        self.assertTrue(a1.on_board)
        self.assertFalse(a1.offset(-1, 0).on_board)
        self.assertFalse(Coord(7, 7).offset(0, 1).on_board)
        self.assertEqual(a1.offset(1, 2), Coord(1, 2))


class TestMoveShape(unittest.TestCase):
    def test_given_single_and_double_advance_when_classifying_then_straight_steps(self):
        one = mv('e2e3')
        self.assertTrue(one.is_straight)
        self.assertTrue(one.is_one_step)
        self.assertFalse(one.is_two_step)
        two = mv('e2e4')
        self.assertTrue(two.is_two_step)
        self.assertEqual(two.rank_delta, 2)
        self.assertTrue(one.is_in_area)
        self.assertTrue(two.is_in_area)

    def test_given_direction_when_classifying_then_vertical_sign_follows_destination(self):
        self.assertTrue(mv('e2e3').is_whiteward)
        self.assertEqual(mv('e2e3').vertical_sign, 1)
        self.assertTrue(mv('e7e6').is_blackward)
        self.assertEqual(mv('e7e6').vertical_sign, -1)

    def test_given_diagonals_when_classifying_then_left_and_right_detected(self):
        left = mv('e4d5')
        right = mv('e4f5')
        self.assertTrue(left.is_diagonal_left)
        self.assertFalse(left.is_diagonal_right)
        self.assertTrue(right.is_diagonal_right)
        self.assertTrue(left.is_diagonal and right.is_diagonal)
        self.assertTrue(left.is_in_area and right.is_in_area)

    def test_given_non_pawn_shapes_when_classifying_then_not_in_area(self):
        for text in ('e2f4', 'e2g3', 'e2e5', 'e4f4', 'e4e4', 'a1c3', 'e2d4'):
            self.assertFalse(mv(text).is_in_area, text)

    def test_given_en_passant_ranks_when_classifying_then_shape_matches_only_capture_rank(self):
        self.assertTrue(mv('d5e6').is_en_passant_shape)
        self.assertTrue(mv('e4d3').is_en_passant_shape)
        self.assertFalse(mv('d5d6').is_en_passant_shape)   # straight
        self.assertFalse(mv('d4e5').is_en_passant_shape)   # wrong rank for White
        self.assertFalse(mv('e5d4').is_en_passant_shape)   # wrong rank for Black

    def test_given_off_board_endpoint_when_checking_then_not_in_board(self):
        self.assertTrue(mv('a2a3').is_in_board)
        self.assertFalse(Move(Coord(0, 1), Coord(-1, 2)).is_in_board)
        self.assertFalse(Move(Coord(7, 6), Coord(7, 8)).is_in_board)

    def test_given_text_when_parsing_then_endpoints_render_back(self):
        m = mv('e2e4')
        self.assertEqual(str(m.src), 'e2')
        self.assertEqual(str(m.dst), 'e4')
        self.assertEqual(m.notation, 'e2e4')
        with self.assertRaises(ValueError):
            Move.parse('e2e')

    def test_given_null_move_when_inspecting_then_not_a_double_step(self):
        self.assertFalse(NULL_MOVE.is_two_step)
        self.assertFalse(NULL_MOVE.is_in_area)


if __name__ == '__main__':
    unittest.main()
