"""Development data for the static collection backend.

Rows are JSON-shaped (ISO-8601 strings for timestamps) exactly as the
database and REST backends hand them to the admin service.
"""

SEED_USERS = [
    {
        "id": "u-1", "username": "john_doe", "email": "john@example.com",
        "first_name": "John", "last_name": "Doe", "avatar": None,
        "level": 12, "xp": 4820, "coins": 310, "streak": 6,
        "is_active": True, "is_verified": True, "is_premium": False, "role": "user",
        "created_at": "2024-01-03T09:12:00Z", "last_login": "2024-01-20T18:44:00Z",
        "submissions_count": 148, "achievements_count": 14, "country": "US", "bio": None,
    },
    {
        "id": "u-2", "username": "jane_smith", "email": "jane@example.com",
        "first_name": "Jane", "last_name": "Smith", "avatar": None,
        "level": 21, "xp": 11200, "coins": 905, "streak": 31,
        "is_active": True, "is_verified": True, "is_premium": True, "role": "moderator",
        "created_at": "2023-11-18T14:00:00Z", "last_login": "2024-01-21T07:05:00Z",
        "submissions_count": 402, "achievements_count": 37, "country": "GB", "bio": "Graphs all day",
    },
    {
        "id": "u-3", "username": "mike_wilson", "email": "mike@example.com",
        "first_name": "Mike", "last_name": "Wilson", "avatar": None,
        "level": 4, "xp": 760, "coins": 40, "streak": 0,
        "is_active": False, "is_verified": False, "is_premium": False, "role": "user",
        "created_at": "2024-01-15T11:30:00Z", "last_login": None,
        "submissions_count": 9, "achievements_count": 2, "country": "CA", "bio": None,
    },
    {
        "id": "u-4", "username": "admin", "email": "admin@dsa.local",
        "first_name": "Platform", "last_name": "Admin", "avatar": None,
        "level": 1, "xp": 0, "coins": 0, "streak": 0,
        "is_active": True, "is_verified": True, "is_premium": True, "role": "admin",
        "created_at": "2023-10-01T00:00:00Z", "last_login": "2024-01-21T08:00:00Z",
        "submissions_count": 0, "achievements_count": 0, "country": None, "bio": None,
    },
]

SEED_ACHIEVEMENTS = [
    {
        "id": "a-1", "name": "First Steps", "description": "Solve your first problem",
        "icon": "Footprints", "category": "PROBLEM_SOLVING", "rarity": "COMMON",
        "points": 10, "coins": 5, "xp": 50,
        "requirements": {"type": "problems_solved", "target": 1},
        "is_active": True, "is_hidden": False, "display_order": 1,
        "created_at": "2024-01-01T00:00:00Z", "updated_at": "2024-01-01T00:00:00Z",
    },
    {
        "id": "a-2", "name": "On Fire", "description": "Keep a 30 day streak",
        "icon": "Flame", "category": "STREAK", "rarity": "EPIC",
        "points": 250, "coins": 100, "xp": 1000,
        "requirements": {"type": "streak_days", "target": 30},
        "is_active": True, "is_hidden": False, "display_order": 2,
        "created_at": "2024-01-02T00:00:00Z", "updated_at": "2024-01-10T00:00:00Z",
    },
    {
        "id": "a-3", "name": "Graph Master", "description": "Solve 50 graph problems",
        "icon": "Network", "category": "PROBLEM_SOLVING", "rarity": "LEGENDARY",
        "points": 500, "coins": 250, "xp": 2500,
        "requirements": {"type": "problems_solved", "target": 50, "category": "Graphs"},
        "is_active": False, "is_hidden": True, "display_order": 3,
        "created_at": "2024-01-05T00:00:00Z", "updated_at": "2024-01-05T00:00:00Z",
    },
]

SEED_CHALLENGES = [
    {
        "id": "c-1", "title": "Weekly Algorithm Challenge #45",
        "description": "Solve array and string problems against the clock",
        "difficulty": "MEDIUM", "category": "Arrays",
        "start_date": "2024-01-15T10:00:00Z", "end_date": "2024-01-22T10:00:00Z",
        "max_participants": 1000, "current_participants": 756, "prize_pool": 5000,
        "status": "ACTIVE", "type": "WEEKLY", "leaderboard": True, "rated": True, "featured": True,
        "created_at": "2024-01-10T08:00:00Z", "updated_at": "2024-01-15T09:30:00Z",
    },
    {
        "id": "c-2", "title": "Graph Theory Marathon",
        "description": "A month of graph traversal, shortest paths and flows",
        "difficulty": "EXPERT", "category": "Graphs",
        "start_date": "2024-02-01T00:00:00Z", "end_date": "2024-02-28T23:59:59Z",
        "max_participants": 500, "current_participants": 124, "prize_pool": 10000,
        "status": "UPCOMING", "type": "MONTHLY", "leaderboard": True, "rated": True, "featured": False,
        "created_at": "2024-01-20T10:00:00Z", "updated_at": "2024-01-20T10:00:00Z",
    },
    {
        "id": "c-3", "title": "Beginner Friendly Contest",
        "description": "Warm-up problems for new members",
        "difficulty": "BEGINNER", "category": "Basic Programming",
        "start_date": "2024-01-20T14:00:00Z", "end_date": "2024-01-20T16:00:00Z",
        "max_participants": 200, "current_participants": 200, "prize_pool": 500,
        "status": "COMPLETED", "type": "DAILY", "leaderboard": True, "rated": False, "featured": False,
        "created_at": "2024-01-19T12:00:00Z", "updated_at": "2024-01-20T16:30:00Z",
    },
]

SEED_CATEGORIES = [
    {
        "id": "cat-1", "name": "Arrays & Strings", "slug": "arrays-strings",
        "description": "Fundamental data structures for storing sequences",
        "icon": "Grid", "color": "#3B82F6", "parent_id": None,
        "level": 1, "sort_order": 1, "is_active": True, "is_featured": True,
        "problem_count": 45, "avg_success_rate": 72.5, "total_submissions": 15420,
        "created_at": "2024-01-01T00:00:00Z", "updated_at": "2024-01-15T10:00:00Z",
    },
    {
        "id": "cat-2", "name": "Array Manipulation", "slug": "array-manipulation",
        "description": "In-place updates, two pointers and prefix sums",
        "icon": "Layers", "color": "#60A5FA", "parent_id": "cat-1",
        "level": 2, "sort_order": 1, "is_active": True, "is_featured": False,
        "problem_count": 25, "avg_success_rate": 78.2, "total_submissions": 8920,
        "created_at": "2024-01-02T00:00:00Z", "updated_at": "2024-01-10T08:00:00Z",
    },
    {
        "id": "cat-3", "name": "Trees & Graphs", "slug": "trees-graphs",
        "description": "Hierarchical and network data structures",
        "icon": "BookOpen", "color": "#10B981", "parent_id": None,
        "level": 1, "sort_order": 2, "is_active": True, "is_featured": True,
        "problem_count": 38, "avg_success_rate": 58.3, "total_submissions": 12350,
        "created_at": "2024-01-05T00:00:00Z", "updated_at": "2024-01-18T16:00:00Z",
    },
    {
        "id": "cat-4", "name": "Bit Manipulation", "slug": "bit-manipulation",
        "description": "Tricks with binary representations",
        "icon": "Binary", "color": "#F59E0B", "parent_id": None,
        "level": 1, "sort_order": 3, "is_active": False, "is_featured": False,
        "problem_count": 0, "avg_success_rate": 0.0, "total_submissions": 0,
        "created_at": "2024-01-12T00:00:00Z", "updated_at": "2024-01-12T00:00:00Z",
    },
]

SEED_SUBMISSIONS = [
    {
        "id": "s-1", "user_id": "u-1", "username": "john_doe",
        "problem_id": "p-456", "problem_title": "Two Sum",
        "problem_difficulty": "EASY", "problem_category": "Arrays",
        "code": "function twoSum(nums, target) {\n  const seen = new Map();\n  return [];\n}",
        "language": "javascript", "status": "ACCEPTED",
        "runtime": 68, "memory": 42.1, "score": 100,
        "test_cases_passed": 57, "total_test_cases": 57,
        "submission_time": "2024-01-15T14:30:00Z", "execution_time": 68,
        "error_message": None, "notes": None,
        "is_flagged": False, "plagiarism_score": 3.2, "optimized": True,
        "created_at": "2024-01-15T14:30:00Z", "updated_at": "2024-01-15T14:30:05Z",
    },
    {
        "id": "s-2", "user_id": "u-2", "username": "jane_smith",
        "problem_id": "p-457", "problem_title": "Binary Tree Traversal",
        "problem_difficulty": "MEDIUM", "problem_category": "Trees",
        "code": "def inorder(root):\n    return []\n",
        "language": "python", "status": "ACCEPTED",
        "runtime": 32, "memory": 14.8, "score": 100,
        "test_cases_passed": 40, "total_test_cases": 40,
        "submission_time": "2024-01-15T15:45:00Z", "execution_time": 32,
        "error_message": None, "notes": None,
        "is_flagged": False, "plagiarism_score": 1.0, "optimized": True,
        "created_at": "2024-01-15T15:45:00Z", "updated_at": "2024-01-15T15:45:03Z",
    },
    {
        "id": "s-3", "user_id": "u-3", "username": "mike_wilson",
        "problem_id": "p-458", "problem_title": "Longest Common Subsequence",
        "problem_difficulty": "MEDIUM", "problem_category": "Dynamic Programming",
        "code": "int lcs(string a, string b) { return 0; }",
        "language": "cpp", "status": "TIME_LIMIT_EXCEEDED",
        "runtime": 2000, "memory": 128.0, "score": 35,
        "test_cases_passed": 14, "total_test_cases": 40,
        "submission_time": "2024-01-16T09:10:00Z", "execution_time": 2000,
        "error_message": "Time limit exceeded on test 15", "notes": None,
        "is_flagged": True, "plagiarism_score": 81.5, "optimized": False,
        "created_at": "2024-01-16T09:10:00Z", "updated_at": "2024-01-16T09:10:02Z",
    },
]

SEED_LEADERBOARD = [
    {
        "id": "l-1", "user_id": "u-2", "username": "jane_smith", "email": "jane@example.com",
        "avatar": None, "rank": 1, "previous_rank": 2, "score": 9850,
        "total_problems": 402, "total_submissions": 530, "accepted_submissions": 470,
        "acceptance_rate": 88.7, "current_streak": 31, "max_streak": 45,
        "total_xp": 11200, "level": 21, "coins": 905, "country": "GB",
        "joined_at": "2023-11-18T14:00:00Z", "last_active_at": "2024-01-21T07:05:00Z",
        "achievements": 37,
    },
    {
        "id": "l-2", "user_id": "u-1", "username": "john_doe", "email": "john@example.com",
        "avatar": None, "rank": 2, "previous_rank": 1, "score": 7420,
        "total_problems": 148, "total_submissions": 260, "accepted_submissions": 190,
        "acceptance_rate": 73.1, "current_streak": 6, "max_streak": 20,
        "total_xp": 4820, "level": 12, "coins": 310, "country": "US",
        "joined_at": "2024-01-03T09:12:00Z", "last_active_at": "2024-01-20T18:44:00Z",
        "achievements": 14,
    },
    {
        "id": "l-3", "user_id": "u-3", "username": "mike_wilson", "email": "mike@example.com",
        "avatar": None, "rank": 3, "previous_rank": 3, "score": 610,
        "total_problems": 9, "total_submissions": 30, "accepted_submissions": 11,
        "acceptance_rate": 36.7, "current_streak": 0, "max_streak": 3,
        "total_xp": 760, "level": 4, "coins": 40, "country": "CA",
        "joined_at": "2024-01-15T11:30:00Z", "last_active_at": "2024-01-18T21:00:00Z",
        "achievements": 2,
    },
]

SEED_ACTIVITY_LOGS = [
    {
        "id": "log-1", "user_id": "u-4", "username": "admin", "email": "admin@dsa.local",
        "action": "USER_BANNED", "resource_type": "USER", "resource_id": "u-3",
        "resource_name": "mike_wilson", "details": {"reason": "plagiarism"},
        "ip_address": "10.0.0.5", "user_agent": "Mozilla/5.0",
        "timestamp": "2024-01-16T10:00:00Z", "severity": "WARNING", "success": True,
    },
    {
        "id": "log-2", "user_id": "u-1", "username": "john_doe", "email": "john@example.com",
        "action": "LOGIN", "resource_type": "USER", "resource_id": "u-1",
        "resource_name": "john_doe", "details": {},
        "ip_address": "203.0.113.7", "user_agent": "Mozilla/5.0",
        "timestamp": "2024-01-20T18:44:00Z", "severity": "INFO", "success": True,
    },
    {
        "id": "log-3", "user_id": "u-2", "username": "jane_smith", "email": "jane@example.com",
        "action": "SUBMISSION_FAILED", "resource_type": "SUBMISSION", "resource_id": "s-9",
        "resource_name": "Dijkstra, with heaps", "details": {"duration": 5012, "error": "sandbox timeout"},
        "ip_address": "198.51.100.23", "user_agent": "Mozilla/5.0",
        "timestamp": "2024-01-21T07:00:00Z", "severity": "ERROR", "success": False,
    },
]

SEED_COLLECTIONS = {
    "users": SEED_USERS,
    "achievements": SEED_ACHIEVEMENTS,
    "challenges": SEED_CHALLENGES,
    "categories": SEED_CATEGORIES,
    "submissions": SEED_SUBMISSIONS,
    "leaderboard": SEED_LEADERBOARD,
    "activity_logs": SEED_ACTIVITY_LOGS,
}
