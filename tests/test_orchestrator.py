"""
Tests for the interaction orchestrator.

Timing is driven by ManualScheduler; one time unit is one virtual second.
"""
import time

import pytest
from mood_analyzer import (
    Emotion,
    FixedRandomSource,
    InteractionOrchestrator,
    ManualScheduler,
    MoodAnalyzerConfig,
    MoodTier,
    Phase,
    Sentiment,
    UnknownQuickReplyError,
    UploadedImage,
)
from mood_analyzer.interaction import JOKES, QUICK_REPLIES
from mood_analyzer.orchestration import ANALYSIS_TASK, CALM_DOWN_TASK, DISCLOSURE_TASK


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def released():
    """Images handed to the release hook."""
    return []


@pytest.fixture
def orchestrator(scheduler, released):
    return InteractionOrchestrator(
        MoodAnalyzerConfig(),
        scheduler=scheduler,
        random_source=FixedRandomSource(index=0, fraction=0.5),
        image_release_hook=released.append,
    )


@pytest.fixture
def image():
    return UploadedImage(reference="blob:selfie", filename="selfie.png", content_type="image/png")


@pytest.fixture
def cheering(orchestrator, image):
    """Orchestrator already in the Cheering phase."""
    orchestrator.on_image_selected(image)
    orchestrator.on_cheer_accepted()
    return orchestrator


def task_names(scheduler, orchestrator):
    return [task.name for task in scheduler.pending(orchestrator.session_id)]


class TestUploadAndRefusal:
    """Tests for the Upload and Refused phases."""

    def test_image_selected_refuses(self, orchestrator, image):
        orchestrator.on_image_selected(image)
        
        assert orchestrator.phase == Phase.REFUSED
        assert orchestrator.uploaded_image == image
        assert orchestrator.refusal_prompt_open

    def test_missing_handle_is_noop(self, orchestrator):
        orchestrator.on_image_selected(None)
        
        assert orchestrator.phase == Phase.UPLOAD
        assert orchestrator.uploaded_image is None

    def test_second_image_is_ignored(self, orchestrator, image):
        orchestrator.on_image_selected(image)
        orchestrator.on_image_selected(UploadedImage(reference="blob:other"))
        
        assert orchestrator.uploaded_image == image

    def test_cheer_accepted_closes_prompt(self, orchestrator, image):
        orchestrator.on_image_selected(image)
        orchestrator.on_cheer_accepted()
        
        assert orchestrator.phase == Phase.CHEERING
        assert not orchestrator.refusal_prompt_open
        assert orchestrator.mood_level == 0

    def test_dismiss_keeps_refused_phase(self, orchestrator, image):
        orchestrator.on_image_selected(image)
        orchestrator.on_refusal_dismissed()
        
        assert orchestrator.phase == Phase.REFUSED
        assert not orchestrator.refusal_prompt_open
        
        orchestrator.on_cheer_accepted()
        assert orchestrator.phase == Phase.CHEERING

    def test_cancel_resets(self, orchestrator, image, released):
        orchestrator.on_image_selected(image)
        orchestrator.on_cancel()
        
        assert orchestrator.phase == Phase.UPLOAD
        assert orchestrator.uploaded_image is None
        assert released == [image]

    def test_cheer_without_image_is_noop(self, orchestrator):
        orchestrator.on_cheer_accepted()
        
        assert orchestrator.phase == Phase.UPLOAD


class TestPhaseGating:
    """Tests that mood commands outside Cheering are ignored."""

    def test_message_during_upload_is_ignored(self, orchestrator):
        assert orchestrator.on_message_sent("You are amazing") is None
        
        assert orchestrator.mood_level == 0
        assert orchestrator.phase == Phase.UPLOAD

    def test_quick_reply_during_refused_is_ignored(self, orchestrator, image):
        orchestrator.on_image_selected(image)
        orchestrator.on_quick_reply_clicked(True)
        
        assert orchestrator.mood_level == 0
        assert orchestrator.phase == Phase.REFUSED

    def test_joke_outside_cheering_still_told(self, orchestrator):
        joke = orchestrator.on_joke_requested()
        
        assert joke == JOKES[0]
        assert orchestrator.mood_level == 0

    def test_input_ignored_while_analyzing(self, cheering, scheduler):
        cheering.session.mood.increase(80)
        scheduler.advance(1.0)
        assert cheering.phase == Phase.ANALYZING
        
        assert cheering.on_message_sent("bad bad bad") is None
        cheering.on_quick_reply_clicked(False)
        cheering.on_joke_requested()
        cheering.on_image_selected(UploadedImage(reference="blob:late"))
        
        assert cheering.mood_level == 80
        assert cheering.phase == Phase.ANALYZING


class TestCheering:
    """Tests for mood-changing commands."""

    def test_positive_message(self, cheering):
        assert cheering.on_message_sent("You are amazing") == Sentiment.POSITIVE
        assert cheering.mood_level == 15

    def test_negative_message(self, cheering):
        cheering.on_message_sent("great")
        cheering.on_message_sent("great")
        
        assert cheering.on_message_sent("this is terrible") == Sentiment.NEGATIVE
        assert cheering.mood_level == 12

    def test_blank_message_is_noop(self, cheering):
        cheering.update_pending_message("   ")
        
        assert cheering.on_message_sent() is None
        assert cheering.mood_level == 0
        assert cheering.pending_message_text == "   "

    def test_pending_message_is_sent_and_cleared(self, cheering):
        cheering.update_pending_message("I love it")
        
        assert cheering.on_message_sent() == Sentiment.POSITIVE
        assert cheering.pending_message_text == ""

    def test_pending_cleared_for_negative_message_too(self, cheering):
        cheering.update_pending_message("you suck")
        
        assert cheering.on_message_sent() == Sentiment.NEGATIVE
        assert cheering.pending_message_text == ""

    def test_quick_replies(self, cheering):
        cheering.on_quick_reply_clicked(True)
        assert cheering.mood_level == 12
        
        cheering.on_quick_reply_clicked(False)
        assert cheering.mood_level == 0

    def test_quick_reply_by_index(self, cheering):
        reply = cheering.on_quick_reply_selected(0)
        
        assert reply == QUICK_REPLIES[0]
        assert cheering.mood_level == 12

    def test_unknown_quick_reply_index(self, cheering):
        with pytest.raises(UnknownQuickReplyError):
            cheering.on_quick_reply_selected(len(QUICK_REPLIES))

    def test_joke_raises_mood(self, cheering):
        assert cheering.on_joke_requested() == JOKES[0]
        assert cheering.mood_level == 18

    def test_snapshot_reflects_tier(self, cheering):
        cheering.session.mood.increase(45)
        snapshot = cheering.snapshot()
        
        assert snapshot.mood_tier == MoodTier.NEUTRAL
        assert snapshot.mood_message == "I'm starting to feel better..."
        assert snapshot.to_dict()["phase"] == "cheering"


class TestAutoAdvance:
    """Tests for the excited-tier trigger."""

    def test_crossing_schedules_analysis_once(self, cheering, scheduler):
        cheering.session.mood.increase(65)
        assert task_names(scheduler, cheering) == []
        
        cheering.session.mood.increase(20)
        assert cheering.mood_level == 85
        assert cheering.mood_tier == MoodTier.EXCITED
        assert cheering.phase == Phase.CHEERING
        assert task_names(scheduler, cheering) == [CALM_DOWN_TASK]
        
        # Already excited: no second trigger
        cheering.on_quick_reply_clicked(True)
        assert task_names(scheduler, cheering) == [CALM_DOWN_TASK]
        
        scheduler.advance(0.5)
        assert cheering.phase == Phase.CHEERING
        
        scheduler.advance(0.5)
        assert cheering.phase == Phase.ANALYZING
        assert task_names(scheduler, cheering) == [ANALYSIS_TASK]

    def test_recrossing_while_pending_does_not_duplicate(self, cheering, scheduler):
        cheering.session.mood.increase(85)
        cheering.on_quick_reply_clicked(False)
        assert cheering.mood_tier == MoodTier.HAPPY
        
        cheering.on_quick_reply_clicked(True)
        assert cheering.mood_tier == MoodTier.EXCITED
        assert task_names(scheduler, cheering) == [CALM_DOWN_TASK]

    def test_analysis_not_synchronous(self, cheering):
        cheering.on_joke_requested()
        cheering.session.mood.increase(70)
        
        assert cheering.phase == Phase.CHEERING

    def test_results_and_disclosure_timing(self, cheering, scheduler):
        cheering.session.mood.increase(80)
        scheduler.advance(1.0)
        assert cheering.analysis_result is None
        
        scheduler.advance(2.5)
        assert cheering.phase == Phase.ANALYZING
        
        scheduler.advance(0.5)
        assert cheering.phase == Phase.RESULTS
        assert cheering.analysis_result is not None
        assert not cheering.fooled_revealed
        assert task_names(scheduler, cheering) == [DISCLOSURE_TASK]
        
        scheduler.advance(2.0)
        assert cheering.fooled_revealed
        assert cheering.phase == Phase.RESULTS
        assert scheduler.pending() == []


class TestReset:
    """Tests for reset and timer cancellation."""

    def test_reset_during_analyzing_cancels_results(self, cheering, scheduler):
        cheering.session.mood.increase(90)
        scheduler.advance(1.0)
        assert cheering.phase == Phase.ANALYZING
        
        cheering.reset()
        scheduler.advance(10.0)
        
        assert cheering.phase == Phase.UPLOAD
        assert cheering.analysis_result is None
        assert not cheering.fooled_revealed
        assert scheduler.pending() == []

    def test_reset_during_calm_down(self, cheering, scheduler):
        cheering.session.mood.increase(90)
        cheering.reset()
        scheduler.advance(10.0)
        
        assert cheering.phase == Phase.UPLOAD

    def test_new_session_not_hijacked_by_old_timers(self, cheering, scheduler, image):
        cheering.session.mood.increase(90)
        cheering.reset()
        
        cheering.on_image_selected(image)
        cheering.on_cheer_accepted()
        scheduler.advance(10.0)
        
        assert cheering.phase == Phase.CHEERING

    def test_reset_hides_disclosure(self, cheering, scheduler):
        cheering.session.mood.increase(90)
        scheduler.run_all()
        assert cheering.fooled_revealed
        
        cheering.reset()
        assert not cheering.fooled_revealed

    def test_reset_is_idempotent(self, cheering, released, image):
        cheering.on_message_sent("great")
        first_id = cheering.session_id
        
        cheering.reset()
        after_one = cheering.snapshot()
        cheering.reset()
        after_two = cheering.snapshot()
        
        for snapshot in (after_one, after_two):
            assert snapshot.phase == Phase.UPLOAD
            assert snapshot.mood_level == 0
            assert snapshot.uploaded_image is None
            assert snapshot.analysis_result is None
            assert not snapshot.fooled_revealed
            assert snapshot.pending_message_text == ""
        assert cheering.session.is_pristine()
        assert after_one.session_id != first_id
        assert released == [image]


class TestEndToEnd:
    """Full interaction scenario."""

    def test_full_prank(self, orchestrator, scheduler, image):
        orchestrator.on_image_selected(image)
        assert orchestrator.phase == Phase.REFUSED
        
        orchestrator.on_cheer_accepted()
        assert orchestrator.phase == Phase.CHEERING
        assert orchestrator.mood_level == 0
        
        assert orchestrator.on_message_sent("You are amazing") == Sentiment.POSITIVE
        assert orchestrator.mood_level == 15
        
        orchestrator.on_quick_reply_clicked(False)
        assert orchestrator.mood_level == 0
        
        assert orchestrator.on_joke_requested() in JOKES
        assert orchestrator.mood_level == 18
        
        for _ in range(3):
            orchestrator.on_quick_reply_clicked(True)
        assert orchestrator.mood_level == 54
        
        while orchestrator.mood_level < 80:
            orchestrator.on_quick_reply_clicked(True)
        assert orchestrator.mood_level == 90
        assert orchestrator.phase == Phase.CHEERING
        
        scheduler.advance(1.0)
        assert orchestrator.phase == Phase.ANALYZING
        
        scheduler.advance(3.0)
        assert orchestrator.phase == Phase.RESULTS
        result = orchestrator.analysis_result
        assert result is not None
        assert result.emotion == Emotion.HAPPY
        assert 0.75 <= result.confidence < 1.0
        
        scheduler.advance(2.0)
        assert orchestrator.fooled_revealed

    def test_full_prank_in_real_time(self, image):
        """Test the same flow with threading timers and a tiny time unit."""
        orchestrator = InteractionOrchestrator(MoodAnalyzerConfig(time_unit_seconds=0.01))
        orchestrator.on_image_selected(image)
        orchestrator.on_cheer_accepted()
        for _ in range(7):
            orchestrator.on_joke_requested()
        
        deadline = time.monotonic() + 5.0
        while not orchestrator.fooled_revealed and time.monotonic() < deadline:
            time.sleep(0.01)
        
        assert orchestrator.phase == Phase.RESULTS
        assert orchestrator.fooled_revealed
        assert 0.75 <= orchestrator.analysis_result.confidence < 1.0
