"""
sim: Simulation core
=====================

Modules
-------
entities
    :class:`Street`, the :class:`Drive` / :class:`Wait` action variants and
    the per-car :class:`CarTracker`.
network
    :class:`RoadNetwork` street-name interning.
light_schedule
    :func:`compile_schedule` and the :func:`is_green` primitive.
route_plan
    :func:`plan_routes` action programs and initial street queues.
engine
    :class:`Simulation` tick loop and :func:`score_documents`.
score
    :func:`car_points` / :func:`total_score` aggregation.
metrics
    :class:`RunMetrics` counter snapshot.
errors
    :class:`UnknownStreet` and :class:`UnknownIntersection`.
"""
