"""
APPLICATION LAYER - Use cases

commands/ → mutations (create/update/delete topics, posts, comments)
queries/  → thin reads (topic by slug, post by id)
common/   → CQRS interfaces, result type, validation gate, view paths
"""
