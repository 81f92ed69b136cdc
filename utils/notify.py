#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import json
import logging

from utils.constants import SLOTS

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def notify(event, sub, msg=None):
    """
    Log an unusual event with enough of the request to reproduce it
    """
    text = ""
    if event and "request" in event:
        request = event["request"]
        intent = request.get("intent", None) if request else None
        slots = intent.get("slots", None) if intent else None

        if intent:
            text += "REQUEST:\n\n"
            text += "  " + str(request.get("type"))
            if "name" in intent:
                text += " - " + intent["name"]
            text += "\n\n"

        if slots:
            text += "SLOTS:\n\n"
            for slot in SLOTS:
                text += "  %-15s %s\n" % (
                    slot + ":",
                    str((slots.get(slot) or {}).get("value", None)),
                )
            text += "\n"

    text += "EVENT:\n\n"
    text += json.dumps(event, indent=4, default=str)
    text += "\n\n"

    if msg:
        text += "MESSAGE:\n\n"
        text += "  " + str(msg)
        text += "\n\n"

    logger.info(f"NOTIFY:\n\n  {sub}\n\n{text}")
