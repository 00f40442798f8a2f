import unittest
import tempfile
import os
import json
import shutil
from communitychat.server.repo import UsersRepo, CommunitiesRepo, DirectoryRepo, Stores
from communitychat.server.models import Identity, User, Community, Message, DirectoryEntry

class TestRepos(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def path(self, name):
        return os.path.join(self.temp_dir, name)

    def test_users_survive_reload(self):
        repo = UsersRepo(self.path("users.jsonl"))
        repo.insert(User(id=Identity("p1"), username="alice", groups_created=["devs"], created_at=5))

        reloaded = UsersRepo(self.path("users.jsonl"))
        user = reloaded.get("alice")
        self.assertEqual(user.id, Identity("p1"))
        self.assertEqual(user.groups_created, ["devs"])
        self.assertEqual(user.created_at, 5)

    def test_values_and_file_in_key_order(self):
        repo = DirectoryRepo(self.path("directory.jsonl"))
        for name in ["b", "c", "a"]:
            repo.insert(DirectoryEntry(name=name, owner=Identity("o")))
        self.assertEqual([e.name for e in repo.values()], ["a", "b", "c"])
        self.assertEqual(list(repo), ["a", "b", "c"])

        with open(self.path("directory.jsonl"), encoding="utf-8") as f:
            names = [json.loads(line)["name"] for line in f if line.strip()]
        self.assertEqual(names, ["a", "b", "c"])

    def test_insert_replaces_and_returns_previous(self):
        repo = DirectoryRepo(self.path("directory.jsonl"))
        self.assertIsNone(repo.insert(DirectoryEntry(name="a", owner=Identity("o1"))))
        previous = repo.insert(DirectoryEntry(name="a", owner=Identity("o2")))
        self.assertEqual(previous.owner, Identity("o1"))
        self.assertEqual(len(repo), 1)
        self.assertEqual(repo.get("a").owner, Identity("o2"))

    def test_remove(self):
        repo = DirectoryRepo(self.path("directory.jsonl"))
        repo.insert(DirectoryEntry(name="a", owner=Identity("o")))
        self.assertIsNotNone(repo.remove("a"))
        self.assertIsNone(repo.remove("a"))
        self.assertNotIn("a", DirectoryRepo(self.path("directory.jsonl")))

    def test_community_messages_round_trip(self):
        repo = CommunitiesRepo(self.path("communities.jsonl"))
        msg = Message(id="m1", sender=Identity("p2"), message_text="héllo", created_at=3)
        repo.insert(Community(id="c1", owner=Identity("p1"), name_of_community="devs",
                              members=["alice", "bob"], messages=[msg], created_at=1, creator="alice"))

        community = CommunitiesRepo(self.path("communities.jsonl")).get("devs")
        self.assertEqual(community.members, ["alice", "bob"])
        self.assertEqual(community.messages, [msg])
        self.assertEqual(community.creator, "alice")

    def test_community_without_creator_field_loads(self):
        with open(self.path("communities.jsonl"), "w", encoding="utf-8") as f:
            f.write(json.dumps({"id": "c1", "owner": "p1", "name_of_community": "devs",
                                "members": ["alice"], "messages": [], "created_at": 1}) + "\n")
        community = CommunitiesRepo(self.path("communities.jsonl")).get("devs")
        self.assertIsNone(community.creator)

    def test_failed_write_keeps_file_and_memory(self):
        repo = UsersRepo(self.path("users.jsonl"))
        for name in ["alice", "bob", "zed"]:
            repo.insert(User(id=Identity("p"), username=name))

        with self.assertRaises(UnicodeEncodeError):
            repo.insert(User(id=Identity("p"), username="b\ud800"))

        self.assertEqual(repo.keys(), ["alice", "bob", "zed"])
        self.assertEqual(UsersRepo(self.path("users.jsonl")).keys(), ["alice", "bob", "zed"])
        self.assertFalse(os.path.exists(self.path("users.jsonl.tmp")))

    def test_stores_open_creates_directory(self):
        data_dir = os.path.join(self.temp_dir, "nested", "data")
        stores = Stores.open(data_dir)
        self.assertTrue(os.path.isdir(data_dir))
        stores.users.insert(User(id=Identity("p"), username="u"))
        self.assertTrue(os.path.exists(os.path.join(data_dir, "users.jsonl")))

if __name__ == '__main__':
    unittest.main()
