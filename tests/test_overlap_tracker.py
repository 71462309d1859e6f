import unittest
from unittest.mock import Mock

from dropmatch.entities import Category, DraggableItem, TargetSlot, next_id
from dropmatch.events import CandidateChanged
from dropmatch.geometry import Vec3
from dropmatch.overlap import OverlapTracker
from dropmatch.resolver import DropResolver
from dropmatch.world import SceneWorld


def make_target(name, category=Category.CUPCAKE):
    return TargetSlot(name=name, category=category, position=Vec3(), size=Vec3(1, 1, 1), parts=[])


def make_item(category=Category.CUPCAKE):
    return DraggableItem(id=next_id(), category=category, position=Vec3(), size=Vec3(1, 1, 1), parts=[])


class OverlapTrackerTestCase(unittest.TestCase):
    def test_compatible_overlap_sets_candidate_and_enlarges(self):
        item = make_item()
        target = make_target("stand")
        OverlapTracker(item, hover_scale=1.1).on_overlap_begin(target)
        self.assertIs(target, item.candidate)
        self.assertAlmostEqual(1.1, target.scale)
        self.assertTrue(target.enlarged)
        self.assertEqual(item.id, target.claimed_by)

    def test_tag_mismatch_changes_nothing(self):
        item = make_item(Category.DONUT)
        target = make_target("stand", Category.CUPCAKE)
        listener = Mock()
        OverlapTracker(item, listener=listener).on_overlap_begin(target)
        self.assertIsNone(item.candidate)
        self.assertEqual(1.0, target.scale)
        self.assertIsNone(target.claimed_by)
        listener.on_event.assert_not_called()

    def test_last_entered_target_wins_and_previous_is_reset(self):
        item = make_item()
        first = make_target("first")
        second = make_target("second")
        tracker = OverlapTracker(item)
        tracker.on_overlap_begin(first)
        tracker.on_overlap_begin(second)
        self.assertIs(second, item.candidate)
        self.assertEqual(1.0, first.scale)
        self.assertIsNone(first.claimed_by)
        self.assertTrue(second.enlarged)

        # Leaving a target that is no longer the candidate is ignored.
        tracker.on_overlap_end(first)
        self.assertIs(second, item.candidate)
        self.assertTrue(second.enlarged)

    def test_overlap_end_clears_candidate(self):
        item = make_item()
        target = make_target("stand")
        tracker = OverlapTracker(item)
        tracker.on_overlap_begin(target)
        tracker.on_overlap_end(target)
        self.assertIsNone(item.candidate)
        self.assertEqual(target.baseline_scale, target.scale)
        self.assertIsNone(target.claimed_by)

    def test_enlarged_scale_is_relative_to_baseline(self):
        item = make_item()
        target = TargetSlot(
            name="stand", category=Category.CUPCAKE, position=Vec3(), size=Vec3(1, 1, 1), parts=[], baseline_scale=2.0
        )
        self.assertEqual(2.0, target.scale)
        self.assertFalse(target.enlarged)
        tracker = OverlapTracker(item, hover_scale=1.5)
        tracker.on_overlap_begin(target)
        self.assertAlmostEqual(3.0, target.scale)
        self.assertTrue(target.enlarged)
        tracker.on_overlap_end(target)
        self.assertEqual(2.0, target.scale)
        self.assertFalse(target.enlarged)

    def test_first_item_keeps_a_claimed_target(self):
        target = make_target("stand")
        first, second = make_item(), make_item()
        first_tracker = OverlapTracker(first)
        second_tracker = OverlapTracker(second)
        first_tracker.on_overlap_begin(target)
        second_tracker.on_overlap_begin(target)
        self.assertIs(target, first.candidate)
        self.assertIsNone(second.candidate)
        self.assertEqual(first.id, target.claimed_by)

        first_tracker.on_overlap_end(target)
        self.assertIsNone(target.claimed_by)
        self.assertFalse(target.enlarged)
        # Without a world the tracker alone does not re-acquire the slot.
        self.assertIsNone(second.candidate)
        second_tracker.on_overlap_begin(target)
        self.assertIs(target, second.candidate)

    def test_candidate_tracks_alternating_sequence(self):
        item = make_item()
        targets = [make_target(f"t{i}") for i in range(3)]
        tracker = OverlapTracker(item)
        for target in targets:
            tracker.on_overlap_begin(target)
            self.assertIs(target, item.candidate)
            enlarged = [t for t in targets if t.enlarged]
            self.assertEqual([target], enlarged)
            tracker.on_overlap_end(target)
            self.assertIsNone(item.candidate)
            self.assertFalse(any(t.enlarged for t in targets))

    def test_listener_receives_candidate_changes(self):
        item = make_item()
        first = make_target("first")
        second = make_target("second")
        listener = Mock()
        tracker = OverlapTracker(item, listener=listener)
        tracker.on_overlap_begin(first)
        tracker.on_overlap_begin(second)
        tracker.on_overlap_end(second)
        events = [c.args[0] for c in listener.on_event.call_args_list]
        self.assertEqual(
            [
                CandidateChanged(item, None, first),
                CandidateChanged(item, first, second),
                CandidateChanged(item, second, None),
            ],
            events,
        )

    def test_non_target_objects_are_ignored(self):
        item = make_item()
        OverlapTracker(item).on_overlap_begin(object())
        self.assertIsNone(item.candidate)


class SlotHandoverTestCase(unittest.TestCase):
    def setUp(self):
        self.world = SceneWorld()
        self.target = self.world.add_target(make_target("stand"))
        self.first, self.second = make_item(), make_item()
        self.world.add_item(self.first, OverlapTracker(self.first))
        self.world.add_item(self.second, OverlapTracker(self.second))

    def test_second_item_is_rejected_while_first_holds_the_slot(self):
        self.assertIs(self.target, self.first.candidate)
        self.assertIsNone(self.second.candidate)
        self.assertEqual(self.first.id, self.target.claimed_by)

    def test_waiting_item_takes_over_when_first_moves_away(self):
        self.world.move_item(self.first, Vec3(5, 0, 0))
        self.assertIsNone(self.first.candidate)
        self.assertIs(self.target, self.second.candidate)
        self.assertEqual(self.second.id, self.target.claimed_by)
        self.assertTrue(self.target.enlarged)

    def test_waiting_item_takes_over_when_first_is_committed(self):
        outcome = DropResolver(self.world).commit(self.first)
        self.assertTrue(outcome.matched)
        self.assertEqual([self.second], self.world.items)
        self.assertIs(self.target, self.second.candidate)
        self.assertEqual(self.second.id, self.target.claimed_by)
        self.assertTrue(self.target.enlarged)

    def test_incompatible_item_does_not_take_over(self):
        donut = make_item(Category.DONUT)
        self.world.add_item(donut, OverlapTracker(donut))
        self.world.remove_item(self.second)
        self.world.move_item(self.first, Vec3(5, 0, 0))
        self.assertIsNone(donut.candidate)
        self.assertIsNone(self.target.claimed_by)
        self.assertFalse(self.target.enlarged)


if __name__ == "__main__":
    unittest.main()
