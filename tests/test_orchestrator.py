"""Tests for the verification orchestrator."""

import asyncio
import uuid

import pytest
from unittest.mock import AsyncMock, patch

from nocap_verifier.utils.config import VerificationConfig
from nocap_verifier.verification.consensus import ConsensusResolver
from nocap_verifier.verification.correction import CorrectionSynthesizer
from nocap_verifier.verification.models import ConsensusLabel, Verdict
from nocap_verifier.verification.orchestrator import VerificationOrchestrator

from mock_agents import AGENT_ORDER, ExplodingAgent, StaticAgent, configured, provider, static_agents

T, F, I = Verdict.TRUE, Verdict.FALSE, Verdict.INCONCLUSIVE


def orchestrator_with(agents, config=None) -> VerificationOrchestrator:
    config = config or VerificationConfig()
    return VerificationOrchestrator(config=config, agents=agents)


class TestNothingConfigured:
    """With no credentials every step takes its documented fallback."""

    @pytest.mark.asyncio
    async def test_all_agents_inconclusive(self):
        orchestrator = VerificationOrchestrator(config=VerificationConfig())

        result = await orchestrator.verify_statement("The Earth is flat")

        assert [a.name for a in result.agents] == AGENT_ORDER
        assert all(a.verdict == Verdict.INCONCLUSIVE for a in result.agents)
        assert all(a.confidence == 0.0 for a in result.agents)
        assert all(a.reasoning == "API key not configured" for a in result.agents)
        assert result.consensus == ConsensusLabel.INCONCLUSIVE
        assert result.lava_gateway_consensus.verdict == Verdict.INCONCLUSIVE
        assert result.lava_gateway_consensus.consensus_score == 1.0
        assert result.is_false is False
        assert result.correct_information is None

    @pytest.mark.asyncio
    async def test_no_sessions_opened(self):
        orchestrator = VerificationOrchestrator(config=VerificationConfig())

        await orchestrator.verify_statement("Paris is the capital of France")

        assert all(agent.session is None for agent in orchestrator.agents)
        assert orchestrator.resolver.session is None
        await orchestrator.close()


class TestVerifyStatement:

    @pytest.mark.asyncio
    async def test_flat_earth_end_to_end(self):
        config = configured("anthropic")
        agents = static_agents(F, F, F, F, reasoning="The Earth is an oblate spheroid.")
        orchestrator = orchestrator_with(agents, config)
        response = {"content": [{"type": "text", "text": "The Earth is round, as measured by satellites."}]}

        with patch.object(orchestrator.synthesizer, "_post_json", new=AsyncMock(return_value=response)):
            result = await orchestrator.verify_statement("The Earth is flat")

        assert result.is_false is True
        assert result.consensus == ConsensusLabel.VERIFIED_FALSE
        assert result.correct_information == "The Earth is round, as measured by satellites."
        assert len(result.agents) == 4
        assert result.statement == "The Earth is flat"
        assert all(agent.calls == ["The Earth is flat"] for agent in agents)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", [None, 42])
    async def test_malformed_synthesis_still_returns_result(self, text):
        config = configured("anthropic")
        agents = static_agents(F, F, F, F, reasoning="The Earth is an oblate spheroid.")
        orchestrator = orchestrator_with(agents, config)
        response = {"content": [{"type": "text", "text": text}]}

        with patch.object(orchestrator.synthesizer, "_post_json", new=AsyncMock(return_value=response)):
            result = await orchestrator.verify_statement("The Earth is flat")

        assert result.is_false is True
        assert result.correct_information == "Correction: The Earth is an oblate spheroid."

    @pytest.mark.asyncio
    async def test_false_without_synthesis_uses_reasoning(self):
        agents = static_agents(F, F, F, I, reasoning="Water boils at 100 degrees at sea level.")
        orchestrator = orchestrator_with(agents)

        result = await orchestrator.verify_statement("Water boils at 50 degrees at sea level")

        assert result.consensus == ConsensusLabel.VERIFIED_FALSE
        assert result.lava_gateway_consensus.consensus_score == 0.75
        assert result.correct_information == "Correction: Water boils at 100 degrees at sea level."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("votes,label", [
        ((T, T, T, F), ConsensusLabel.VERIFIED_TRUE),
        ((F, F, T, T), ConsensusLabel.INCONCLUSIVE),
        ((I, I, F, T), ConsensusLabel.INCONCLUSIVE),
    ])
    async def test_correction_only_for_false(self, votes, label):
        orchestrator = orchestrator_with(static_agents(*votes, reasoning="because"))

        with patch.object(orchestrator.synthesizer, "synthesize", new=AsyncMock()) as synthesize:
            result = await orchestrator.verify_statement("Some statement")

        synthesize.assert_not_called()
        assert result.consensus == label
        assert result.is_false is False
        assert result.correct_information is None

    @pytest.mark.asyncio
    async def test_agent_order_ignores_completion_order(self):
        # Slowest first, fastest last
        agents = [
            StaticAgent(name, Verdict.TRUE, delay_seconds=delay)
            for name, delay in zip(AGENT_ORDER, [0.08, 0.06, 0.04, 0.0])
        ]
        orchestrator = orchestrator_with(agents)

        result = await orchestrator.verify_statement("The sun is a star")

        assert [a.name for a in result.agents] == AGENT_ORDER

    @pytest.mark.asyncio
    async def test_agents_run_concurrently(self):
        agents = [StaticAgent(name, Verdict.TRUE, delay_seconds=0.2) for name in AGENT_ORDER]
        orchestrator = orchestrator_with(agents)

        loop = asyncio.get_running_loop()
        start = loop.time()
        await orchestrator.verify_statement("The sun is a star")
        elapsed = loop.time() - start

        assert elapsed < 0.6

    @pytest.mark.asyncio
    async def test_crashing_agent_becomes_inconclusive(self):
        agents = static_agents(F, F, F)
        agents.append(ExplodingAgent("Bright Data"))
        orchestrator = orchestrator_with(agents)

        result = await orchestrator.verify_statement("The Earth is flat")

        crashed = result.agents[3]
        assert crashed.verdict == Verdict.INCONCLUSIVE
        assert crashed.confidence == 0.0
        assert crashed.reasoning == "Error: agent crashed"
        assert result.consensus == ConsensusLabel.VERIFIED_FALSE

    @pytest.mark.asyncio
    async def test_statement_ids_are_fresh_uuids(self):
        orchestrator = orchestrator_with(static_agents(T, T, T, T))

        first = await orchestrator.verify_statement("The sun is a star")
        second = await orchestrator.verify_statement("The sun is a star")

        assert first.statement_id != second.statement_id
        uuid.UUID(first.statement_id)

    @pytest.mark.asyncio
    async def test_gateway_verdict_drives_result(self):
        config = configured("lava_gateway")
        orchestrator = orchestrator_with(static_agents(T, T, T, T), config)

        with patch.object(orchestrator.resolver, "_post_json",
                          new=AsyncMock(return_value={"verdict": "false", "score": 0.9})):
            result = await orchestrator.verify_statement("The sun is a star")

        assert result.is_false is True
        assert result.consensus == ConsensusLabel.VERIFIED_FALSE
        assert result.lava_gateway_consensus.consensus_score == 0.9
        # No agent voted false, so there is no reasoning to draw on
        assert result.correct_information == (
            "The statement has been determined to be false, but specific corrections are unavailable."
        )


class TestVerifyStatements:

    @pytest.mark.asyncio
    async def test_results_follow_input_order(self):
        orchestrator = orchestrator_with(static_agents(T, T, T, T))
        statements = [f"Statement number {i} is true" for i in range(5)]

        results = await orchestrator.verify_statements(statements)

        assert [r.statement for r in results] == statements

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        orchestrator = orchestrator_with(static_agents(T, T, T, T))
        assert await orchestrator.verify_statements([]) == []


class TestAgentStatus:

    def test_status_reports_configuration(self):
        config = configured("anthropic", "gemini")
        orchestrator = VerificationOrchestrator(config=config)

        status = orchestrator.get_agent_status()

        assert status["total_agents"] == 4
        assert [a["available"] for a in status["agents"]] == [True, False, True, False]
        assert status["gateway_available"] is False
        assert status["correction_synthesis_available"] is True
        assert status["missing_configs"] == ["fetchai", "brightdata", "lava_gateway"]

    def test_injected_components_are_used(self):
        resolver = ConsensusResolver(provider("lava_gateway"))
        synthesizer = CorrectionSynthesizer(provider("anthropic", api_key=""))
        orchestrator = VerificationOrchestrator(
            config=VerificationConfig(),
            agents=static_agents(T, T, T, T),
            resolver=resolver,
            synthesizer=synthesizer
        )

        assert orchestrator.resolver is resolver
        assert orchestrator.synthesizer is synthesizer
