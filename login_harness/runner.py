"""Scenario runner executing step lists through the step bindings."""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import HarnessConfig
from .session import ScenarioSession
from .steps import StepBindings, StepOutcome

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """A named Given/When/Then sequence."""

    name: str
    steps: List[str]


@dataclass
class ScenarioResult:
    """Outcome of one scenario. Steps after the first failure are not run and not listed."""

    name: str
    outcomes: List[StepOutcome] = field(default_factory=list)
    artifacts: Dict[str, str] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failed_step(self) -> Optional[StepOutcome]:
        return next((outcome for outcome in self.outcomes if not outcome.passed), None)


LOGIN_SCENARIOS = [
    Scenario(
        name="Successful login with valid credentials",
        steps=[
            "Given I am on the login page",
            'When I enter username "tomsmith"',
            'And I enter password "SuperSecretPassword!"',
            "And I click the login button",
            "Then I should be logged in successfully",
            "And I should see the secure area",
        ],
    ),
    Scenario(
        name="Failed login with invalid credentials",
        steps=[
            "Given I am on the login page",
            'When I enter username "invalid"',
            'And I enter password "invalid"',
            "And I click the login button",
            "Then I should see an error message",
            'And the error message should contain "Your username is invalid!"',
        ],
    ),
]


class ScenarioRunner:
    """Runs scenarios one after another against a single ScenarioSession."""

    def __init__(self, config: HarnessConfig, session: Optional[ScenarioSession] = None):
        """
        Initialize scenario runner.

        Args:
            config: Harness configuration
            session: Session to drive; a new one is created from config if omitted
        """
        self.config = config
        self.session = session or ScenarioSession(config)
        self.bindings = StepBindings(self.session)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Leave the last session for the next setup unless close_on_exit is set."""
        if self.config.close_on_exit:
            report = self.session.close()
            for warning in report.warnings:
                logger.warning(warning)
        elif self.session.is_active:
            logger.info("Leaving last browser session open (close_on_exit disabled)")

    def run(self, scenario: Scenario) -> ScenarioResult:
        """
        Run scenario steps in order, stopping at the first failure.

        Returns:
            ScenarioResult with one outcome per executed step
        """
        logger.info(f"Scenario: {scenario.name}")
        result = ScenarioResult(name=scenario.name)
        for step in scenario.steps:
            outcome = self.bindings.dispatch(step)
            result.outcomes.append(outcome)
            if not outcome.passed:
                logger.error(f"Scenario '{scenario.name}' failed at step '{step}' ({outcome.error_kind}): {outcome.message}")
                result.artifacts = self._save_artifacts(scenario.name)
                return result
        logger.info(f"Scenario '{scenario.name}' passed")
        return result

    def run_all(self, scenarios: List[Scenario]) -> List[ScenarioResult]:
        results = [self.run(scenario) for scenario in scenarios]
        passed = sum(1 for result in results if result.passed)
        logger.info(f"{passed}/{len(results)} scenarios passed")
        return results

    def _save_artifacts(self, scenario_name: str) -> Dict[str, str]:
        if not self.session.is_active:
            return {}
        name = re.sub(r"[^a-z0-9]+", "-", scenario_name.lower()).strip("-")
        artifacts = self.session.page.save_debug_artifacts(self.config.artifacts_dir, name)
        logger.info(f"Saved debug artifacts to: {self.config.artifacts_dir} (page: {artifacts['url']}, title: {artifacts['title']})")
        return artifacts
