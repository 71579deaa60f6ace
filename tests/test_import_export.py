import json
import unittest

from wordsearch.core.exceptions import InvalidGrid
from wordsearch.core.models import Position, PuzzleSnapshot
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator


WORDS = ["HELLO", "WORLD", "TEST"]


class ExportImportTests(unittest.TestCase):
    def setUp(self) -> None:
        self.source = WordSearchGenerator(
            GeneratorConfig(words=WORDS, size=10, allow_diagonal=True, seed=4)
        )
        self.source.generate()
        self.exported = self.source.export()
        # Derived size for these words is 10 as well.
        self.target = WordSearchGenerator(GeneratorConfig(words=WORDS, allow_diagonal=True))

    def test_export_shape(self) -> None:
        self.assertEqual(self.exported.size, 10)
        self.assertEqual(len(self.exported.grid), self.source.get_grid_size())
        self.assertEqual(len(self.exported.grid[0]), self.source.get_grid_size())
        self.assertEqual(set(self.exported.positions), set(WORDS))

    def test_export_is_detached(self) -> None:
        self.exported.grid[0][0] = "*"
        self.exported.positions["HELLO"].clear()
        self.assertNotEqual(self.source.get_grid()[0][0], "*")
        self.assertEqual(len(self.source.get_word_positions("HELLO")), 5)

    def test_round_trip(self) -> None:
        self.target.import_grid(self.exported.grid, self.exported.positions)
        self.assertEqual(self.target.get_grid(), self.source.get_grid())
        self.assertEqual(self.target.get_positions(), self.source.get_positions())
        self.assertTrue(self.target.has_word("hello"))

    def test_import_snapshot_round_trip(self) -> None:
        self.target.import_snapshot(self.exported)
        self.assertEqual(self.target.export(), self.exported)

    def test_imported_state_is_copied(self) -> None:
        self.target.import_grid(self.exported.grid, self.exported.positions)
        self.exported.grid[0][0] = "*"
        self.exported.positions["WORLD"].clear()
        self.assertNotEqual(self.target.get_grid()[0][0], "*")
        self.assertEqual(len(self.target.get_word_positions("WORLD")), 5)

    def test_rejects_truncated_row(self) -> None:
        grid = [list(row) for row in self.exported.grid]
        grid[3] = grid[3][:-1]
        with self.assertRaisesRegex(InvalidGrid, "Invalid grid dimensions"):
            self.target.import_grid(grid, self.exported.positions)

    def test_rejects_narrow_grid(self) -> None:
        grid = [row[:-1] for row in self.exported.grid]
        with self.assertRaisesRegex(InvalidGrid, r"Expected 10x10"):
            self.target.import_grid(grid, self.exported.positions)

    def test_size_is_not_changed_by_import(self) -> None:
        grid = [["A"] * 12 for _ in range(12)]
        with self.assertRaises(InvalidGrid):
            self.target.import_grid(grid, {})
        self.assertEqual(self.target.get_grid_size(), 10)

    def test_rejects_non_matrix(self) -> None:
        with self.assertRaisesRegex(InvalidGrid, "Invalid grid format"):
            self.target.import_grid("ABC", {})
        with self.assertRaisesRegex(InvalidGrid, "Invalid grid format"):
            self.target.import_grid([["A"] * 10] * 9 + ["A" * 10], {})

    def test_rejects_mismatched_placements(self) -> None:
        grid = [["*" if cell == "H" else cell for cell in row] for row in self.exported.grid]
        with self.assertRaisesRegex(InvalidGrid, "mismatched word placements"):
            self.target.import_grid(grid, self.exported.positions)

    def test_rejects_out_of_bounds_positions(self) -> None:
        positions = dict(self.exported.positions)
        positions["TEST"] = [Position(9, 7), Position(9, 8), Position(9, 9), Position(9, 10)]
        with self.assertRaisesRegex(InvalidGrid, "mismatched word placements"):
            self.target.import_grid(self.exported.grid, positions)

    def test_rejects_short_position_list(self) -> None:
        positions = dict(self.exported.positions)
        positions["HELLO"] = positions["HELLO"][:4]
        with self.assertRaisesRegex(InvalidGrid, "mismatched word placements"):
            self.target.import_grid(self.exported.grid, positions)

    def test_rejects_invalid_letters(self) -> None:
        covered = {pos for cells in self.exported.positions.values() for pos in cells}
        free = next(
            Position(x, y) for x in range(10) for y in range(10) if Position(x, y) not in covered
        )
        grid = [list(row) for row in self.exported.grid]
        grid[free.x][free.y] = "a"
        with self.assertRaisesRegex(InvalidGrid, "Invalid letter"):
            self.target.import_grid(grid, self.exported.positions)

    def test_failed_import_leaves_state_untouched(self) -> None:
        before = self.source.export()
        grid = [["*" if cell == "H" else cell for cell in row] for row in self.exported.grid]
        with self.assertRaises(InvalidGrid):
            self.source.import_grid(grid, self.exported.positions)
        self.assertEqual(self.source.export(), before)

    def test_registry_keys_are_canonicalised(self) -> None:
        positions = {word.lower(): cells for word, cells in self.exported.positions.items()}
        self.target.import_grid(self.exported.grid, positions)
        self.assertEqual(set(self.target.get_positions()), set(WORDS))

    def test_rejects_registry_entries_that_are_not_positions(self) -> None:
        generator = WordSearchGenerator(GeneratorConfig(words=["AB"], size=2))
        grid = [["A", "B"], ["", ""]]
        malformed = [
            {"AB": [(0, 0), (0, 1)]},
            {"AB": [{"x": 0, "y": 0}, {"x": 0, "y": 1}]},
            {"AB": None},
            {"AB": [Position(0.0, 0), Position(0, 1)]},
            {"AB": [Position(False, 0), Position(False, True)]},
        ]
        for positions in malformed:
            with self.subTest(positions=positions):
                with self.assertRaisesRegex(InvalidGrid, "mismatched word placements"):
                    generator.import_grid(grid, positions)
        self.assertEqual(generator.get_positions(), {})
        self.assertEqual(generator.to_string(), ". .\n. .")

    def test_empty_cells_are_accepted(self) -> None:
        generator = WordSearchGenerator(GeneratorConfig(words=["AB"], size=2))
        generator.import_grid([["A", "B"], ["", ""]], {"AB": [Position(0, 0), Position(0, 1)]})
        self.assertEqual(generator.to_string(), "A B\n. .")


class SnapshotSerializationTests(unittest.TestCase):
    def test_jsonable_round_trip(self) -> None:
        generator = WordSearchGenerator(GeneratorConfig(words=WORDS, size=10, seed=2))
        generator.generate()
        snapshot = generator.export()
        payload = json.loads(json.dumps(snapshot.to_jsonable()))
        self.assertEqual(payload["size"], 10)
        self.assertEqual(payload["positions"]["TEST"][0], snapshot.positions["TEST"][0].to_jsonable())
        self.assertEqual(PuzzleSnapshot.from_jsonable(payload), snapshot)

    def test_malformed_payload(self) -> None:
        with self.assertRaises(InvalidGrid):
            PuzzleSnapshot.from_jsonable({"grid": []})
        with self.assertRaises(InvalidGrid):
            PuzzleSnapshot.from_jsonable({"grid": [], "positions": {"CAT": [{"x": 0}]}})
        with self.assertRaisesRegex(InvalidGrid, "Invalid grid format"):
            PuzzleSnapshot.from_jsonable({"grid": "ABC", "positions": {}})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
