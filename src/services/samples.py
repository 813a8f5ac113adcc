"""Sample problems shown on first start."""

from datetime import datetime
from typing import Optional

from domain.models import Difficulty, ProblemRecord, utc_now


def sample_problems(now: Optional[datetime] = None) -> list[ProblemRecord]:
    now = now or utc_now()
    return [
        ProblemRecord(
            id="1",
            number="1",
            title="Two Sum",
            difficulty=Difficulty.EASY,
            url="https://leetcode.com/problems/two-sum/",
            tags=["Array", "Hash Table"],
            description=(
                "Given an array of integers nums and an integer target, return indices of the "
                "two numbers such that they add up to target.\n\n"
                "You may assume that each input would have exactly one solution, and you may "
                "not use the same element twice."
            ),
            notes="Use a hash map to store the complement of the current number.",
            code=(
                "class Solution:\n"
                "    def twoSum(self, nums: List[int], target: int) -> List[int]:\n"
                "        prevMap = {}\n"
                "        for i, n in enumerate(nums):\n"
                "            diff = target - n\n"
                "            if diff in prevMap:\n"
                "                return [prevMap[diff], i]\n"
                "            prevMap[n] = i"
            ),
            date_added=now,
            date_edited=now,
        ),
        ProblemRecord(
            id="2",
            number="146",
            title="LRU Cache",
            difficulty=Difficulty.MEDIUM,
            url="https://leetcode.com/problems/lru-cache/",
            tags=["Design", "Hash Table", "Linked List"],
            description=(
                "Design a data structure that follows the constraints of a Least Recently "
                "Used (LRU) cache."
            ),
            notes="Double linked list + hash map is the standard way to achieve O(1) operations.",
            code=(
                "class LRUCache:\n"
                "    def __init__(self, capacity: int):\n"
                "        self.cap = capacity\n"
                "        self.cache = {}  # map key to node\n"
                "        self.left, self.right = Node(0, 0), Node(0, 0)\n"
                "        self.left.next, self.right.prev = self.right, self.left"
            ),
            date_added=now,
            date_edited=now,
        ),
        ProblemRecord(
            id="3",
            number="23",
            title="Merge k Sorted Lists",
            difficulty=Difficulty.HARD,
            url="https://leetcode.com/problems/merge-k-sorted-lists/",
            tags=["Linked List", "Divide and Conquer", "Heap"],
            description=(
                "You are given an array of k linked-lists lists, each linked-list is sorted "
                "in ascending order.\n\n"
                "Merge all the linked-lists into one sorted linked-list and return it."
            ),
            notes="Min-heap is efficient here. Time complexity O(N log k).",
            code=(
                "class Solution:\n"
                "    def mergeKLists(self, lists: List[Optional[ListNode]]) -> Optional[ListNode]:\n"
                "        if not lists:\n"
                "            return None\n"
                "        while len(lists) > 1:\n"
                "            merged = []\n"
                "            for i in range(0, len(lists), 2):\n"
                "                l1 = lists[i]\n"
                "                l2 = lists[i + 1] if (i + 1) < len(lists) else None\n"
                "                merged.append(self.mergeList(l1, l2))\n"
                "            lists = merged\n"
                "        return lists[0]"
            ),
            date_added=now,
            date_edited=now,
        ),
    ]
