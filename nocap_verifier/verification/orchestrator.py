"""
Verification orchestrator that fans a statement out to all agents
"""

import asyncio
import logging
import time
import uuid
from typing import Any, Dict, List, Optional, Sequence

from ..utils.config import VerificationConfig
from .agents import BrightDataAgent, ClaudeAgent, FetchAIAgent, GeminiAgent, VerificationAgent
from .consensus import ConsensusResolver
from .correction import CorrectionSynthesizer
from .models import AgentVerdict, ConsensusLabel, Verdict, VerificationResult

logger = logging.getLogger(__name__)


class VerificationOrchestrator:
    """
    Runs every agent concurrently on a statement, resolves consensus and
    synthesizes a correction when the statement is false
    """

    def __init__(self,
                 config: Optional[VerificationConfig] = None,
                 agents: Optional[Sequence[VerificationAgent]] = None,
                 resolver: Optional[ConsensusResolver] = None,
                 synthesizer: Optional[CorrectionSynthesizer] = None):
        """
        Initialize the orchestrator

        Args:
            config: Provider configuration, read from the environment if None
            agents: Agents in reporting order; defaults to Claude, Fetch.ai,
                Gemini, Bright Data built from config
            resolver: Consensus resolver; defaults to the configured gateway
            synthesizer: Correction synthesizer; defaults to Claude
        """
        self.config = config or VerificationConfig.from_env()
        self.logger = logger.getChild("orchestrator")

        timeout = self.config.timeout_seconds
        self.agents: List[VerificationAgent] = list(agents) if agents is not None else [
            ClaudeAgent(self.config.anthropic, timeout_seconds=timeout),
            FetchAIAgent(self.config.fetchai, timeout_seconds=timeout),
            GeminiAgent(self.config.gemini, timeout_seconds=timeout),
            BrightDataAgent(self.config.brightdata, timeout_seconds=timeout),
        ]
        self.resolver = resolver or ConsensusResolver(self.config.lava_gateway, timeout_seconds=timeout)
        self.synthesizer = synthesizer or CorrectionSynthesizer(self.config.anthropic, timeout_seconds=timeout)

    async def verify_statement(self, statement: str) -> VerificationResult:
        """
        Verify a single declarative statement

        Args:
            statement: The statement text

        Returns:
            VerificationResult; provider failures degrade to inconclusive
            verdicts and are never raised
        """
        statement_id = str(uuid.uuid4())
        start_time = time.time()

        self.logger.debug(f"Verifying statement {statement_id}: {statement[:50]}...")

        # gather keeps input order regardless of completion order
        tasks = [
            asyncio.create_task(
                self._verify_with_agent(agent, statement),
                name=f"verify_{agent.name}"
            )
            for agent in self.agents
        ]
        agent_verdicts = await asyncio.gather(*tasks)

        consensus = await self.resolver.resolve(agent_verdicts)

        is_false = consensus.verdict == Verdict.FALSE
        correct_information = None
        if is_false:
            correct_information = await self.synthesizer.synthesize(statement, agent_verdicts)

        processing_time = int((time.time() - start_time) * 1000)
        self.logger.info(
            f"Statement {statement_id} resolved {consensus.verdict.value} "
            f"(score {consensus.consensus_score:.2f}) in {processing_time}ms"
        )

        return VerificationResult(
            statement_id=statement_id,
            statement=statement,
            is_false=is_false,
            consensus=ConsensusLabel.from_verdict(consensus.verdict),
            correct_information=correct_information,
            agents=tuple(agent_verdicts),
            lava_gateway_consensus=consensus,
            processing_time_ms=processing_time
        )

    async def verify_statements(self, statements: Sequence[str]) -> List[VerificationResult]:
        """
        Verify multiple statements with bounded concurrency

        Args:
            statements: Statements to verify

        Returns:
            Results in the same order as the input
        """
        if not statements:
            return []

        self.logger.info(f"Starting verification of {len(statements)} statements")
        semaphore = asyncio.Semaphore(self.config.max_concurrent_statements)

        async def verify_with_limit(statement: str) -> VerificationResult:
            async with semaphore:
                return await self.verify_statement(statement)

        return list(await asyncio.gather(*(verify_with_limit(s) for s in statements)))

    async def _verify_with_agent(self, agent: VerificationAgent, statement: str) -> AgentVerdict:
        """
        Verify with a single agent, handling errors gracefully

        Returns:
            AgentVerdict (inconclusive if the agent itself blew up)
        """
        try:
            result = await agent.verify(statement)
            self.logger.debug(f"{agent.name} result: {result.verdict.value}")
            return result
        except Exception as e:
            self.logger.error(f"Error in {agent.name}: {e}")
            return agent.create_error_verdict(str(e))

    def get_agent_status(self) -> Dict[str, Any]:
        """Get configuration status of all agents and the gateway"""
        return {
            'total_agents': len(self.agents),
            'agents': [
                {
                    'name': agent.name,
                    'available': agent.is_available(),
                    'type': agent.__class__.__name__
                }
                for agent in self.agents
            ],
            'gateway_available': self.resolver.is_available(),
            'correction_synthesis_available': self.synthesizer.is_available(),
            'missing_configs': self.config.missing_configs()
        }

    async def close(self):
        """Close all HTTP sessions"""
        for component in [*self.agents, self.resolver, self.synthesizer]:
            if hasattr(component, 'close'):
                try:
                    await component.close()
                except Exception as e:
                    self.logger.error(f"Error closing {component.name}: {e}")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
