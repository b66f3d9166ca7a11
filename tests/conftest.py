import logging

import pytest

from elea.definitions import (
    Addition,
    Agency,
    Agent,
    Application,
    Arrow,
    Computation,
    Computer,
    Continuation,
    Function,
    Program,
    ProgramIdentity,
    Proof,
    Property,
    Space,
    Story,
    Theory,
    Time,
    Type,
)
from elea.spec import Metadata, Spec


@pytest.fixture(autouse=True)
def _quiet_cli_logging():
    # Keep the CLI from binding handlers to a captured stderr.
    elea_logger = logging.getLogger("elea")
    previous = getattr(elea_logger, "_configured", False)
    elea_logger._configured = True
    yield
    elea_logger._configured = previous


def build_program(program_id: str = "tables") -> Program:
    return Program(
        identity=ProgramIdentity(
            id=program_id,
            name="Tables",
            description="Rows joined into tables",
            creator=Agent(id="ada", computers=["sql"]),
        ),
        theory=Theory(
            space=Space(
                abstractions=["relational"],
                states=["rows", "table", "joined"],
                arrows=[
                    Arrow(id="collect", init_state_id="rows", term_state_id="table"),
                    Arrow(id="join", init_state_id="table", term_state_id="joined"),
                ],
            ),
            time=Time(
                computers=[Computer(id="sql", type="query-engine", properties=["deterministic"])],
                types=[
                    Type(
                        id="query-engine",
                        expansion=[
                            Addition(
                                id="indexes",
                                states=["indexed"],
                                arrows=[Arrow(id="index", init_state_id="table", term_state_id="indexed")],
                            )
                        ],
                        extension=[Continuation(id="then-join", function_ref="join-fn")],
                    )
                ],
                properties=[Property(id="deterministic")],
            ),
            agency=Agency(
                agents=[Agent(id="ada", computers=["sql"])],
                functions=[Function(function_id="join-fn", init_state_id="table", term_state_id="joined")],
            ),
        ),
        applications=[
            Application(
                additions=[Addition(id="archive", abstractions=["cold"], states=["archived"])],
                computations=[
                    Computation(
                        computation_id="c1",
                        arrow_id="collect",
                        computer_id="sql",
                    ),
                    Computation(
                        computation_id="c2",
                        arrow_id="join",
                        computer_id="sql",
                        proofs=[Proof(id="p1", continuation_id="then-join", story_id="s1")],
                    ),
                ],
                stories=[Story(id="s1", agent_id="ada", events=["c1", "c2"])],
            )
        ],
    )


def build_spec() -> Spec:
    return Spec(
        metadata=Metadata(
            id="demo",
            name="Demo",
            description="Two programs",
            version="0.1.0",
            author="ada",
        ),
        programs=[build_program("tables"), build_program("copy")],
    )


@pytest.fixture
def program() -> Program:
    return build_program()


@pytest.fixture
def spec() -> Spec:
    return build_spec()
