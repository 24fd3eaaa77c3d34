"""Graph puzzles: course ordering, connectivity, two-colouring and reachability."""

from collections import deque


def find_order(num_courses, prerequisites):
    """Return an order in which all courses can be taken, or [] if none exists.

    Each prerequisite is a pair ``[course, required]``. Courses with nothing
    left to wait for are taken first-in first-out, starting in index order.
    """
    followers = [[] for _ in range(num_courses)]
    waiting = [0] * num_courses
    for course, required in prerequisites:
        waiting[course] += 1
        followers[required].append(course)

    ready = deque(course for course in range(num_courses) if waiting[course] == 0)
    order = []
    while ready:
        current = ready.popleft()
        order.append(current)
        for course in followers[current]:
            waiting[course] -= 1
            if waiting[course] == 0:
                ready.append(course)

    return order if len(order) == num_courses else []


def valid_path(n, edges, source, destination):
    """Tell whether ``source`` and ``destination`` are joined in an undirected graph of ``n`` nodes."""
    if source == destination:
        return True
    parent = list(range(n))

    def root(node):
        top = node
        while parent[top] != top:
            top = parent[top]
        while parent[node] != top:
            parent[node], node = top, parent[node]
        return top

    for u, v in edges:
        ru, rv = root(u), root(v)
        if ru != rv:
            parent[ru] = rv
        if root(source) == root(destination):
            return True
    return False


def is_bipartite(graph):
    """Tell whether the nodes of the adjacency-list ``graph`` can be two-coloured."""
    colour = [None] * len(graph)
    for start in range(len(graph)):
        if colour[start] is not None:
            continue
        colour[start] = 0
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in graph[node]:
                if colour[neighbour] == colour[node]:
                    return False
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    stack.append(neighbour)
    return True


def can_visit_all_rooms(rooms):
    """Tell whether every room can be entered, starting in room 0 and using the keys found."""
    if not rooms:
        return True
    visited = {0}
    stack = [0]
    while stack:
        for key in rooms[stack.pop()]:
            if key not in visited:
                visited.add(key)
                stack.append(key)
    return len(visited) == len(rooms)