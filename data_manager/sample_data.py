"""Demonstration dataset used on first run"""
from typing import List

from data_manager.schema import Group, Member, Collection


def sample_groups() -> List[Group]:
    return [
        Group("1", "G001", "Sakthi Group", "Lakshmi Devi", "9876543210", "Monday", "2024-01-15"),
        Group("2", "G002", "Anbu Group", "Kumar Raj", "9876543211", "Tuesday", "2024-02-01"),
        Group("3", "G003", "Vetri Group", "Saroja M", "9876543212", "Wednesday", "2024-02-15"),
    ]


def sample_members() -> List[Member]:
    return [
        Member("1", "M001", "Lakshmi Devi", "12 Gandhi Street", "Near Temple", "G001",
               10000.0, 4000.0, 14, "2025-01-01", "Active"),
        Member("2", "M002", "Kumar Raj", "45 Nehru Road", "Bus Stand", "G001",
               15000.0, 6000.0, 14, "2025-01-01", "Active"),
        Member("3", "M003", "Saroja M", "78 Anna Nagar", "School", "G002",
               20000.0, 8000.0, 14, "2025-01-01", "Active"),
        Member("4", "M004", "Ravi K", "23 Main Road", "Hospital", "G002",
               12000.0, 4800.0, 14, "2025-01-01", "Active"),
        Member("5", "M005", "Meena S", "56 Park Avenue", "Market", "G003",
               8000.0, 3200.0, 14, "2025-01-01", "Active"),
    ]


def sample_collections() -> List[Collection]:
    return [
        Collection("1", "2025-01-06", "M001", "G001", 1, 1000.0, 714.29, 285.71, "Paid", "Agent 1"),
        Collection("2", "2025-01-06", "M002", "G001", 1, 1500.0, 1071.43, 428.57, "Paid", "Agent 1"),
        Collection("3", "2025-01-13", "M001", "G001", 2, 1000.0, 714.29, 285.71, "Paid", "Agent 1"),
        Collection("4", "2025-01-13", "M002", "G001", 2, 1500.0, 1071.43, 428.57, "Paid", "Agent 1"),
        Collection("5", "2025-01-20", "M001", "G001", 3, 1000.0, 714.29, 285.71, "Paid", "Agent 1"),
    ]
