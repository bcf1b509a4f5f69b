from concurrent.futures import ThreadPoolExecutor

import pytest

from pytracker.errors import DuplicateProjectKey, InvalidProjectKey, NotFound
from pytracker.schemas import TicketCreate, TicketUpdate
from pytracker.seed import seed_projects, seed_tickets, seed_users
from pytracker.store import ProjectRegistry, TicketStore, UserDirectory, suggest_key


@pytest.fixture
def users():
    directory = UserDirectory()
    directory.load(seed_users())
    return directory


@pytest.fixture
def projects(clock):
    registry = ProjectRegistry(clock=clock)
    registry.load(seed_projects())
    return registry


def make_store(clock, id_policy="monotonic"):
    store = TicketStore(clock=clock, id_policy=id_policy)
    store.load(seed_tickets(seed_users()))
    return store


def new_ticket(project_id="1", title="New ticket"):
    return TicketCreate(
        project_id=project_id,
        title=title,
        status="TODO",
        priority="LOW",
        reporter=seed_users()[0],
    )


class TestUserDirectory:
    def test_register_derives_avatar_from_initials(self, users):
        user = users.register("Maya Jane Patel", "mjp@pytracker.com")

        assert user.avatar == "MJP"
        assert user.id not in {"1", "2", "3"}
        assert users.list()[-1] == user

    def test_register_allows_duplicate_email(self, users):
        users.register("Other Sarah", "sarah@pytracker.com")

        assert len(users) == 4
        assert users.find_by_email("sarah@pytracker.com").id == "1"

    def test_find_by_email_is_case_sensitive(self, users):
        assert users.find_by_email("sarah@pytracker.com").name == "Sarah Chen"
        assert users.find_by_email("Sarah@PyTracker.com") is None

    def test_list_returns_copies(self, users):
        listed = users.list()
        listed[0].name = "Changed"
        listed.clear()

        assert users.find_by_id("1").name == "Sarah Chen"
        assert len(users) == 3


class TestProjectRegistry:
    def test_create_normalizes_key_and_stamps_creation_time(self, projects, clock):
        project = projects.create("Website", "web", "Marketing site")

        assert project.key == "WEB"
        assert project.created_at == clock.current
        assert projects.list()[-1].id == project.id

    def test_create_rejects_invalid_key(self, projects):
        with pytest.raises(InvalidProjectKey):
            projects.create("Website", "WEBSITE")
        assert len(projects) == 2

    def test_create_rejects_duplicate_key(self, projects):
        with pytest.raises(DuplicateProjectKey):
            projects.create("Platform Two", "pt")
        assert len(projects) == 2

    def test_find_by_key(self, projects):
        assert projects.find_by_key("MA").id == "2"
        assert projects.find_by_key("ZZ") is None

    @pytest.mark.parametrize(
        "name, key",
        [("PyTracker Platform", "PP"), ("mobile app", "MA"), ("A Big Long Project Name", "ABLP")],
    )
    def test_suggest_key(self, name, key):
        assert suggest_key(name) == key


class TestTicketStore:
    def test_list_filters_by_project_in_insertion_order(self, clock):
        store = make_store(clock)

        assert [t.id for t in store.list("1")] == ["PT-1", "PT-2", "PT-3", "PT-4"]
        assert [t.id for t in store.list("2")] == ["MA-1"]
        assert len(store.list()) == 5

    def test_get_unknown_ticket_raises(self, clock):
        with pytest.raises(NotFound):
            make_store(clock).get("PT-99")

    def test_monotonic_policy_never_reuses_ids(self, clock, projects):
        store = make_store(clock)
        project = projects.find_by_id("1")

        store.delete("PT-4")
        created = store.create(project, new_ticket())

        assert created.id == "PT-5"

    def test_count_policy_reuses_ids_after_delete(self, clock, projects):
        store = make_store(clock, id_policy="count")
        project = projects.find_by_id("1")

        store.delete("PT-4")
        created = store.create(project, new_ticket())

        assert created.id == "PT-4"

    def test_first_ticket_in_new_project_is_number_one(self, clock, projects):
        store = make_store(clock)
        project = projects.create("Website", "WEB")

        assert store.create(project, new_ticket(project.id)).id == "WEB-1"

    def test_rejects_unknown_id_policy(self, clock):
        with pytest.raises(ValueError):
            TicketStore(clock=clock, id_policy="random")

    def test_update_merges_set_fields_and_refreshes_updated_at(self, clock):
        store = make_store(clock)
        before = store.get("PT-2")

        after = store.update("PT-2", TicketUpdate(priority="URGENT"))

        assert after.priority == "URGENT"
        assert after.title == before.title
        assert after.tags == before.tags
        assert after.assignee == before.assignee
        assert after.created_at == before.created_at
        assert after.updated_at == clock.current

    def test_update_never_moves_updated_at_backwards(self):
        frozen = TicketStore(clock=lambda: seed_tickets(seed_users())[0].created_at)
        frozen.load(seed_tickets(seed_users()))
        before = frozen.get("PT-1")

        first = frozen.update("PT-1", TicketUpdate(title="One"))
        second = frozen.update("PT-1", TicketUpdate(title="Two"))

        assert before.updated_at < first.updated_at < second.updated_at

    def test_returned_tickets_do_not_alias_the_store(self, clock):
        store = make_store(clock)

        ticket = store.get("PT-1")
        ticket.tags.append("MUTATED")
        ticket.assignee.name = "Someone Else"

        fresh = store.get("PT-1")
        assert fresh.tags == ["AUTHENTICATION", "BACKEND"]
        assert fresh.assignee.name == "Sarah Chen"

    def test_concurrent_creates_get_distinct_ids(self, clock, projects):
        store = make_store(clock)
        project = projects.find_by_id("2")

        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(
                pool.map(lambda n: store.create(project, new_ticket("2", f"T{n}")), range(50))
            )

        ids = [ticket.id for ticket in created]
        assert len(set(ids)) == 50
        assert sorted(int(i.split("-")[1]) for i in ids) == list(range(2, 52))
