from elea.definitions import Arrow, Computation, Story
from elea.references import DanglingReference, dangling_references, duplicate_arrow_endpoints


def test_fully_declared_program_has_no_dangling_references(program):
    assert dangling_references(program) == []
    assert duplicate_arrow_endpoints(program) == {}


def test_states_from_additions_count_as_declared(program):
    # "indexed" is only declared by the type expansion addition
    program.theory.space.arrows.append(Arrow(id="scan", init_state_id="indexed", term_state_id="archived"))
    assert dangling_references(program) == []


def test_reports_unknown_arrow_endpoint(program):
    program.theory.space.arrows.append(Arrow(id="lost", init_state_id="rows", term_state_id="void"))
    assert dangling_references(program) == [
        DanglingReference("arrow", "lost", "term_state_id", "void", "state")
    ]


def test_reports_story_and_computation_links(program):
    application = program.applications[0]
    application.computations.append(Computation(computation_id="c3", arrow_id="teleport", computer_id="gpu"))
    application.stories.append(Story(id="s2", agent_id="bob", events=["c3", "c9"]))

    found = {(ref.owner_id, ref.field, ref.missing_id) for ref in dangling_references(program)}
    assert found == {
        ("c3", "arrow_id", "teleport"),
        ("c3", "computer_id", "gpu"),
        ("s2", "agent_id", "bob"),
        ("s2", "events", "c9"),
    }


def test_reports_time_and_agency_links(program):
    program.theory.time.computers[0].type_ = "quantum"
    program.theory.time.types[0].extension[0].function_ref = "missing-fn"
    program.theory.agency.agents[0].computers.append("abacus")

    found = {(ref.owner_kind, ref.target_kind, ref.missing_id) for ref in dangling_references(program)}
    assert found == {
        ("computer", "type", "quantum"),
        ("continuation", "function", "missing-fn"),
        ("agent", "computer", "abacus"),
    }


def test_dangling_reference_str(program):
    ref = DanglingReference("proof", "p1", "story_id", "s9", "story")
    assert str(ref) == "proof 'p1': story_id -> unknown story 's9'"


def test_duplicate_arrow_endpoints_groups_distinct_ids(program):
    program.theory.space.arrows.append(Arrow(id="collect-again", init_state_id="rows", term_state_id="table"))
    program.applications[0].additions[0].arrows.append(
        Arrow(id="collect", init_state_id="rows", term_state_id="table")
    )
    assert duplicate_arrow_endpoints(program) == {("rows", "table"): ["collect", "collect-again"]}
