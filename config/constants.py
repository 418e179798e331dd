from enum import Enum


class MemberStatus(str, Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    DEFAULTED = "Defaulted"

    @property
    def label(self) -> str:
        return {
            "Active": "Repaying",
            "Completed": "Closed",
            "Defaulted": "In default",
        }[self.value]


class CollectionStatus(str, Enum):
    PAID = "Paid"
    PARTIAL = "Partial"
    PENDING = "Pending"


class RecordKind(str, Enum):
    GROUPS = "groups"
    MEMBERS = "members"
    COLLECTIONS = "collections"


MEETING_DAYS = [
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
]

# Serialized field names (snapshot and storage)
GROUP_FIELDS = [
    "id", "groupNo", "groupName", "groupHeadName",
    "headContact", "meetingDay", "formationDate",
]

MEMBER_FIELDS = [
    "id", "memberId", "memberName", "address", "landmark", "groupNo",
    "loanAmount", "totalInterest", "weeks", "startDate", "status",
]

COLLECTION_FIELDS = [
    "id", "collectionDate", "memberId", "groupNo", "weekNo",
    "amountPaid", "principalPaid", "interestPaid", "status", "collectedBy",
]

MEMBER_SUMMARY_COLUMNS = [
    "memberId", "memberName", "groupNo", "loanAmount", "totalPayable",
    "totalPrincipalCollected", "totalInterestCollected",
    "principalBalance", "interestBalance",
    "totalCollected", "totalBalance", "weeksPaid", "status",
]

GROUP_SUMMARY_COLUMNS = [
    "groupNo", "groupName", "groupHead", "totalMembers",
    "totalLoanAmount", "totalPayable",
    "principalCollected", "interestCollected",
    "principalBalance", "interestBalance",
    "totalCollected", "totalBalance", "collectionRate",
]

WEEKLY_DATA_COLUMNS = ["weekNo", "amountCollected", "numberOfPayments"]

# Report sheet names
SHEET_MEMBER_SUMMARY = "Member Summary"
SHEET_GROUP_SUMMARY = "Group Summary"
SHEET_WEEKLY = "Weekly Collections"
SHEET_OVERALL = "Overall"
