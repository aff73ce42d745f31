#!/usr/bin/env python3
"""
Stroke Gestures - Main Entry Point
Recognizes single-finger touchscreen strokes and reports the bound action.

Usage: main.py [templates.json]
"""

import logging
import sys
import time

from stroke_gestures.core.dispatcher import message_dispatcher
from stroke_gestures.core.listener import StrokeListener
from stroke_gestures.errors import TemplateError
from stroke_gestures.gestures.recognizer import Recognizer
from stroke_gestures.gestures.templates import load_registry


def main():
    """Main entry point for the stroke listener."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    try:
        registry = load_registry(sys.argv[1] if len(sys.argv) > 1 else None)
    except TemplateError as e:
        print(f"❌ {e}")
        return 1

    listener = StrokeListener(
        Recognizer(registry),
        message_dispatcher(lambda text: print(f"   💬 {text}"))
    )

    if not listener.start():
        return 1

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
