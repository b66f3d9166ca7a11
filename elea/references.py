"""
Report of cross references that do not resolve inside a program.

Ids are opaque and never dereferenced by the record models, so a document can
name states, computers or stories that it never declares. This module only
reports; it does not reject documents or judge what a proof certifies.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from elea.definitions import Addition, Arrow, Program


@dataclass(frozen=True)
class DanglingReference:
    owner_kind: str
    owner_id: str
    field: str
    missing_id: str
    target_kind: str

    def __str__(self) -> str:
        return (
            f"{self.owner_kind} {self.owner_id!r}: {self.field} -> "
            f"unknown {self.target_kind} {self.missing_id!r}"
        )


def _all_additions(program: Program) -> Iterator[Addition]:
    for type_ in program.theory.time.types:
        yield from type_.expansion
    for application in program.applications:
        yield from application.additions


def _all_arrows(program: Program) -> Iterator[Arrow]:
    yield from program.theory.space.arrows
    for addition in _all_additions(program):
        yield from addition.arrows


def _known_states(program: Program) -> Set[str]:
    states = set(program.theory.space.states)
    for addition in _all_additions(program):
        states.update(addition.states)
    return states


def dangling_references(program: Program) -> List[DanglingReference]:
    """List every id used by the program that names nothing the program declares."""
    theory = program.theory
    applications = program.applications

    states = _known_states(program)
    arrows = {arrow.id for arrow in _all_arrows(program)}
    types = {type_.id for type_ in theory.time.types}
    properties = {prop.id for prop in theory.time.properties}
    computers = {computer.id for computer in theory.time.computers}
    functions = {function.function_id for function in theory.agency.functions}
    continuations = {
        continuation.id
        for type_ in theory.time.types
        for continuation in type_.extension
    }
    agents = {agent.id for agent in theory.agency.agents}
    agents.add(program.identity.creator.id)
    stories = {story.id for application in applications for story in application.stories}
    computations = {
        computation.computation_id
        for application in applications
        for computation in application.computations
    }

    found: List[DanglingReference] = []

    def check(owner_kind: str, owner_id: str, field: str, ids: Iterable[str], known: Set[str], target_kind: str) -> None:
        for ref in ids:
            if ref not in known:
                found.append(DanglingReference(owner_kind, owner_id, field, ref, target_kind))

    for arrow in _all_arrows(program):
        check("arrow", arrow.id, "init_state_id", [arrow.init_state_id], states, "state")
        check("arrow", arrow.id, "term_state_id", [arrow.term_state_id], states, "state")

    for computer in theory.time.computers:
        check("computer", computer.id, "type", [computer.type_], types, "type")
        check("computer", computer.id, "properties", computer.properties, properties, "property")

    for type_ in theory.time.types:
        for continuation in type_.extension:
            check("continuation", continuation.id, "function_ref", [continuation.function_ref], functions, "function")

    for function in theory.agency.functions:
        check("function", function.function_id, "init_state_id", [function.init_state_id], states, "state")
        check("function", function.function_id, "term_state_id", [function.term_state_id], states, "state")

    for agent in [*theory.agency.agents, program.identity.creator]:
        check("agent", agent.id, "computers", agent.computers, computers, "computer")

    for application in applications:
        for computation in application.computations:
            check("computation", computation.computation_id, "arrow_id", [computation.arrow_id], arrows, "arrow")
            check("computation", computation.computation_id, "computer_id", [computation.computer_id], computers, "computer")
            for proof in computation.proofs:
                check("proof", proof.id, "continuation_id", [proof.continuation_id], continuations, "continuation")
                check("proof", proof.id, "story_id", [proof.story_id], stories, "story")
        for story in application.stories:
            check("story", story.id, "agent_id", [story.agent_id], agents, "agent")
            check("story", story.id, "events", story.events, computations, "computation")

    return found


def duplicate_arrow_endpoints(program: Program) -> Dict[Tuple[str, str], List[str]]:
    """Group arrow ids that share one (init_state_id, term_state_id) pair.

    Only pairs carried by more than one distinct arrow id are returned.
    """
    by_pair: Dict[Tuple[str, str], List[str]] = defaultdict(list)
    for arrow in _all_arrows(program):
        ids = by_pair[(arrow.init_state_id, arrow.term_state_id)]
        if arrow.id not in ids:
            ids.append(arrow.id)
    return {pair: ids for pair, ids in by_pair.items() if len(ids) > 1}
