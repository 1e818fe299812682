"""Shared fixtures for mindflow tests."""

from __future__ import annotations

import pytest

from mindflow.core.config import LLMConfig
from mindflow.domains.progress_note import Lexicon, NotePipeline, SectionRuleTable

SCENARIO_TEXT = (
    "Client seemed anxious today, about 7 out of 10. Been clean for 30 days. "
    "We worked on breathing exercises. Gave homework to write down triggers. "
    "See him next week."
)

COMPLETED_NOTE = """SERVICE PROVIDED:
Provided 50-minute individual substance use disorder counseling session at ASAM Level 2.1 intensive outpatient program via telehealth platform.

CLIENT RESPONSE:
Client presented with anxiety symptoms, self-rated 7 on a 0-10 scale. Actively engaged in therapeutic discussion and demonstrated receptiveness to interventions.

INTERVENTIONS:
Implemented Cognitive Behavioral Therapy techniques addressing Dimension 3 (Emotional/Behavioral), including diaphragmatic breathing exercises.

PROGRESS:
Progress toward Goal #1 (maintain sobriety): Client abstinent from substances for 30 consecutive days.

PLAN:
Continue weekly individual sessions. Client to record relapse triggers before next session.
"""


@pytest.fixture(scope="session")
def rules() -> SectionRuleTable:
    return SectionRuleTable.default()


@pytest.fixture(scope="session")
def lexicon() -> Lexicon:
    return Lexicon()


@pytest.fixture(scope="session")
def pipeline(lexicon: Lexicon, rules: SectionRuleTable) -> NotePipeline:
    """Shared pipeline; safe because nothing in it is mutated after construction."""
    return NotePipeline(lexicon=lexicon, rules=rules)


@pytest.fixture
def llm_config() -> LLMConfig:
    """Completion settings with no delay between attempts."""
    return LLMConfig(enabled=True, api_key="test-key", model="test-model", retry_delay_seconds=0.0)


@pytest.fixture
def scenario_text() -> str:
    return SCENARIO_TEXT


@pytest.fixture
def completed_note() -> str:
    return COMPLETED_NOTE
