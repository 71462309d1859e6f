import io
import unittest
from contextlib import redirect_stdout

from dropmatch.command_line import CommandLineInterface
from dropmatch.presets import TARGET_ANCHOR_Y


class CommandLineTestCase(unittest.TestCase):
    def run_commands(self, interface, *commands):
        out = io.StringIO()
        with redirect_stdout(out):
            results = [interface.execute(command) for command in commands]
        return results, out.getvalue()

    def test_palette_drag_matches_cupcake_stand(self):
        interface = CommandLineInterface()
        x, y = 1200 * 0.38, 760 * TARGET_ANCHOR_Y
        results, output = self.run_commands(
            interface,
            "press 56 126",
            f"move {x} {y}",
            f"release {x} {y}",
            "show",
        )
        self.assertEqual([True] * 4, results)
        self.assertIn("spawned item", output)
        self.assertIn("is over cupcake_stand", output)
        self.assertIn("matched cupcake_stand", output)
        self.assertIn("is used up", output)
        stand = interface.scene.world.targets[0]
        self.assertEqual("strawberry_frosting", stand.find_part("icing").renderer.primary.name)

    def test_tray_drag_without_match(self):
        interface = CommandLineInterface()
        tray = interface.scene.event_driven[0]
        x, y = tray.region.x + 5, tray.region.y + 5
        _, output = self.run_commands(interface, f"begin {x} {y}", "drag 600 700", "end 600 700")
        self.assertIn("spawned item", output)
        self.assertIn("dropped, no match", output)
        self.assertEqual([], interface.scene.world.items)

    def test_invalid_input(self):
        interface = CommandLineInterface()
        results, output = self.run_commands(interface, "", "press x", "jump 1 2", "quit")
        self.assertEqual([True, True, True, False], results)
        self.assertIn("Invalid coordinates!", output)
        self.assertIn("Invalid command!", output)


if __name__ == "__main__":
    unittest.main()
