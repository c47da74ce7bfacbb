import pytest

from review_assigner import Person, ValidationError, assign_single_pool, make_rng


class TestAssignSinglePool:
    def test_two_people_review_each_other(self):
        alice = Person("Alice", "E1")
        bob = Person("Bob", "E2")

        assignment = assign_single_pool([alice, bob], make_rng(0))

        assert assignment == {alice: [bob], bob: [alice]}

    def test_every_person_reviews_exactly_one(self, team):
        assignment = assign_single_pool(team, make_rng(1))

        assert len(assignment) == len(team)
        assert set(assignment) == set(team)
        assert all(len(reviewees) == 1 for reviewees in assignment.values())

    def test_every_person_is_reviewed_once(self, team):
        assignment = assign_single_pool(team, make_rng(2))

        reviewees = [r for reviewees in assignment.values() for r in reviewees]
        assert sorted(p.employee_id for p in reviewees) == sorted(p.employee_id for p in team)

    @pytest.mark.parametrize("seed", range(25))
    def test_no_self_review(self, team, seed):
        assignment = assign_single_pool(team, make_rng(seed))
        for reviewer, reviewees in assignment.items():
            assert reviewer not in reviewees

    def test_forms_single_cycle(self, team):
        assignment = assign_single_pool(team, make_rng(3))

        start = team[0]
        current = start
        visited = []
        for _ in range(len(team)):
            visited.append(current)
            current = assignment[current][0]
        assert current == start
        assert len(set(visited)) == len(team)

    def test_identity_order_cycle(self, team, identity_rng):
        assignment = assign_single_pool(team, identity_rng)
        for i, person in enumerate(team):
            assert assignment[person] == [team[(i + 1) % len(team)]]

    def test_same_seed_is_deterministic(self, team):
        first = assign_single_pool(team, make_rng(99))
        second = assign_single_pool(team, make_rng(99))
        assert list(first.items()) == list(second.items())

    def test_input_not_mutated(self, team):
        original = list(team)
        assign_single_pool(team, make_rng(4))
        assert team == original
        assert [p.name for p in team] == [p.name for p in original]

    def test_default_rng_keeps_invariants(self, team):
        assignment = assign_single_pool(team)
        assert len(assignment) == len(team)


class TestAssignSinglePoolErrors:
    def test_single_person(self):
        with pytest.raises(ValidationError) as exc_info:
            assign_single_pool([Person("Alice", "E1")])
        assert "at least 2" in str(exc_info.value)

    def test_empty_pool(self):
        with pytest.raises(ValidationError):
            assign_single_pool([])

    def test_none_pool(self):
        with pytest.raises(ValidationError):
            assign_single_pool(None)

    def test_none_member(self):
        with pytest.raises(ValidationError):
            assign_single_pool([Person("Alice", "E1"), None])

    def test_duplicate_id(self):
        people = [Person("Alice", "E1"), Person("Bob", "E1"), Person("Charlie", "E3")]
        with pytest.raises(ValidationError) as exc_info:
            assign_single_pool(people)
        assert "E1" in str(exc_info.value)
