"""
Orders load test.

Two scenarios run side by side against the orders service:
- post: 2 users creating orders via POST /orders, for 30s
- get: 10 users fetching random orders via GET /orders/<id>, for 30s

Run:
    locust -f locustfile.py --headless
    locust -f locustfile.py --headless --host=http://localhost:8080

User counts and durations come from scenarios.py and can be overridden
with ORDERS_<SCENARIO>_VUS / ORDERS_<SCENARIO>_DURATION.
"""

import json
import logging

from locust import HttpUser, LoadTestShape, constant, events, task
from locust.exception import StopUser

from gen_orders import generate_order, order_path
from scenarios import BASE_URL, load_scenarios, max_duration, total_vus

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}

SCENARIOS = load_scenarios()


class ScenarioUser(HttpUser):
    """A virtual user bound to one scenario's VU count and duration."""

    abstract = True
    host = BASE_URL
    wait_time = constant(0)  # iterate back to back, like a constant-vus executor
    scenario = None

    def scenario_over(self):
        shape = self.environment.shape_class
        if shape is None:
            # Without the shape, --run-time bounds the test instead
            return False
        return shape.get_run_time() >= self.scenario.duration_s

    def stop_if_scenario_over(self):
        if self.scenario_over():
            raise StopUser()


class PostOrderUser(ScenarioUser):
    scenario = SCENARIOS["post"]
    fixed_count = scenario.vus

    @task
    def create_order(self):
        self.stop_if_scenario_over()
        payload = json.dumps(generate_order())
        self.client.post("/orders", data=payload, headers=HEADERS)


class GetOrderUser(ScenarioUser):
    scenario = SCENARIOS["get"]
    fixed_count = scenario.vus

    @task
    def get_order(self):
        self.stop_if_scenario_over()
        self.client.get(order_path(), name="/orders/[id]")


def bind_user_classes(scenarios, user_classes):
    """Map scenario names to user classes, checking each scenario's task exists."""
    by_name = {cls.scenario.name: cls for cls in user_classes}
    bound = {}
    for name, s in scenarios.items():
        cls = by_name.get(name)
        if cls is None:
            raise ValueError(f"No user class for scenario {name!r}")
        task_names = [t.__name__ for t in cls.tasks]
        if s.exec not in task_names:
            raise ValueError(f"Scenario {name!r} runs {s.exec!r}, but {cls.__name__} only has {task_names}")
        bound[name] = cls
    return bound


USER_CLASSES = bind_user_classes(SCENARIOS, [PostOrderUser, GetOrderUser])


class ConstantVusShape(LoadTestShape):
    """Spawn every scenario's users at once and end the test with the longest scenario.

    The user count is never changed mid-test: a re-dispatch would respawn
    fixed_count users of a finished scenario. Users of a shorter scenario
    stop themselves once its duration has passed.
    """

    scenario_users = list(USER_CLASSES.values())

    def scenarios(self):
        return {cls.scenario.name: cls.scenario for cls in self.scenario_users}

    def tick(self):
        scenarios = self.scenarios()
        if self.get_run_time() >= max_duration(scenarios):
            return None
        users = total_vus(scenarios)
        return (users, users)


@events.test_start.add_listener
def log_scenarios(environment, **kwargs):
    for s in SCENARIOS.values():
        logger.info("Scenario %s: %s, %d VUs for %s (%s)", s.name, s.executor, s.vus, s.duration, s.exec)
    logger.info(
        "Running %d VUs for up to %ds against %s",
        total_vus(SCENARIOS),
        max_duration(SCENARIOS),
        environment.host or BASE_URL,
    )
