# ar_core/models/enums.py
# -*- coding: utf-8 -*-
from enum import Enum

class AnnotationType(Enum):
    TEXT = 'text'
    HIGHLIGHT = 'highlight'
    PAUSE = 'pause'
    BRANDING = 'branding'

# Annotation.type stays a plain string; authoring tools emitted values beyond these.

class ActionKind(Enum):
    TIME = 'time'
    URL = 'url'

class DisplayState(Enum):
    HIDDEN = 'hidden'
    VISIBLE = 'visible'
    DISMISSED = 'dismissed'
