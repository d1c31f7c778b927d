"""Round-count milestones that hosts may react to (e.g. play a sound)."""


def is_round_milestone(previous_count: int, current_count: int, interval: int) -> bool:
    """
    Check whether a change in round count lands on a milestone.

    Only growth counts, so loading a saved game with 10 rounds does not
    fire. An interval of 0 disables milestones.
    """
    if interval <= 0:
        return False
    return current_count > previous_count and current_count > 0 and current_count % interval == 0
