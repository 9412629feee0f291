# Services package init
"""
Taskboard Backend — Services Layer (Workflows)
================================================

What:  One class per business area, each running one operation per call.
How:   Services receive their stores (and the hasher) in the constructor;
       taskboard.dependencies builds them per request.

Service Inventory:
    - AuthService:   register, login
    - TaskService:   list_tasks, create_task
    - ClientService: list_clients, get_client
"""
