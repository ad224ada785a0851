#!/usr/bin/env python3
"""
Interactive CLI demo for Mood Analyzer.

Plays the whole prank in a terminal against a real-time orchestrator.
"""
import time
from pathlib import Path

from mood_analyzer import (
    InteractionOrchestrator,
    Phase,
    UnknownQuickReplyError,
    UploadedImage,
    load_config_from_env,
)
from mood_analyzer.interaction.content import (
    ANALYZING_MESSAGE,
    DISCLOSURE_MESSAGE,
    DISCLOSURE_TITLE,
    MOOD_EMOJIS,
    QUICK_REPLIES,
    REFUSAL_MESSAGE,
    REFUSAL_TITLE,
)
from mood_analyzer.security import FileValidator


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Mood Analyzer - Interactive CLI Demo")
    print("=" * 60)
    print("\nCommands:")
    print("  upload <path>   Upload a photo of your face")
    print("  cheer           Agree to cheer the analyzer up")
    print("  cancel          Give up and start over")
    print("  say <text>      Send a message")
    print("  replies         List quick replies")
    print("  reply <n>       Send quick reply number n")
    print("  joke            Tell a joke")
    print("  state           Show the current state")
    print("  reset           Start over")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_state(orchestrator):
    """Print the parts of the state that matter for the current phase."""
    snapshot = orchestrator.snapshot()
    phase = snapshot.phase
    
    if phase is Phase.UPLOAD:
        print("📷 Upload a clear photo of your face and I'll analyze your mood and emotions!")
    elif phase is Phase.REFUSED:
        if snapshot.refusal_prompt_open:
            print(f"😠 {REFUSAL_TITLE}\n   {REFUSAL_MESSAGE}")
        print("   (type 'cheer' to cheer me up or 'cancel' to give up)")
    elif phase is Phase.CHEERING:
        print(f"{MOOD_EMOJIS[snapshot.mood_tier]} {snapshot.mood_message}  [{snapshot.mood_level}% happy]")
    elif phase is Phase.ANALYZING:
        print(f"🤩 {ANALYZING_MESSAGE}")
    elif phase is Phase.RESULTS and snapshot.analysis_result:
        result = snapshot.analysis_result
        print(f"🎭 Your mood: {result.emotion.value} ({result.confidence:.0%} confidence)")
        print(f"   {result.description}")
    
    if snapshot.fooled_revealed:
        print(f"\n😂 HAHA! {DISCLOSURE_TITLE}\n   {DISCLOSURE_MESSAGE}")
        print("   (type 'reset' to play again)")
    print("-" * 60)


def timers_still_running(orchestrator, started_in):
    """
    Whether the automatic part of the prank is still under way.
    
    Waiting ends once the disclosure is shown, a reset returns to Upload, or
    the phase leaves the timer-driven stretch (the calm-down wait in the
    starting phase, then Analyzing and Results).
    """
    if orchestrator.fooled_revealed:
        return False
    phase = orchestrator.phase
    if phase is Phase.UPLOAD:
        return False
    return phase is started_in or phase in (Phase.ANALYZING, Phase.RESULTS)


def wait_for_phase_change(orchestrator, config):
    """Block while timers move the interaction forward on their own."""
    timeout = (
        config.calm_down_delay_seconds
        + config.analysis_delay_seconds
        + config.disclosure_delay_seconds
        + 1.0
    )
    deadline = time.monotonic() + timeout
    started_in = last_phase = orchestrator.phase
    
    while time.monotonic() < deadline and timers_still_running(orchestrator, started_in):
        time.sleep(0.1)
        if orchestrator.phase is not last_phase:
            last_phase = orchestrator.phase
            print_state(orchestrator)
    
    if orchestrator.fooled_revealed:
        print_state(orchestrator)


def handle_command(orchestrator, command, argument):
    """
    Apply one command.
    
    :return: False if the command was not recognized
    """
    if command == "upload":
        path = Path(argument).expanduser()
        is_valid, error_msg = FileValidator.validate_image_file(str(path))
        if not is_valid:
            print(f"❌ {error_msg}")
            return True
        orchestrator.on_image_selected(UploadedImage(
            reference=str(path.resolve()),
            filename=path.name,
            content_type=FileValidator.content_type(str(path)),
        ))
    elif command == "cheer":
        orchestrator.on_cheer_accepted()
    elif command == "cancel":
        orchestrator.on_cancel()
    elif command == "say":
        sentiment = orchestrator.on_message_sent(argument)
        if sentiment is not None:
            print(f"💬 That sounded {sentiment.value}.")
    elif command == "replies":
        for i, reply in enumerate(QUICK_REPLIES, start=1):
            print(f"  {i:2d}. {reply.text}")
        return True
    elif command == "reply":
        try:
            reply = orchestrator.on_quick_reply_selected(int(argument) - 1)
            print(f"💬 You: {reply.text}")
        except (ValueError, UnknownQuickReplyError) as e:
            print(f"❌ Unknown quick reply: {argument} ({e})")
            return True
    elif command == "joke":
        print(f"🃏 Here's a joke: {orchestrator.on_joke_requested()}")
    elif command == "reset":
        orchestrator.reset()
    elif command != "state":
        return False
    
    print_state(orchestrator)
    return True


def main():
    """Main CLI loop."""
    print_banner()
    
    config = load_config_from_env()
    orchestrator = InteractionOrchestrator(config)
    print_state(orchestrator)
    
    # Interactive loop
    while True:
        try:
            line = input("You: ").strip()
            
            if not line:
                continue
            
            # Check for exit commands
            if line.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Thanks for playing! Goodbye!\n")
                break
            
            command, _, argument = line.partition(" ")
            if not handle_command(orchestrator, command.lower(), argument.strip()):
                print(f"❓ Unknown command: {command}")
                continue
            
            if orchestrator.snapshot().pending_tasks:
                wait_for_phase_change(orchestrator, config)
        
        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break
    
    orchestrator.reset()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
