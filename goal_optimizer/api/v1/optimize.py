"""POST /v1/optimize - goal allocation endpoint"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from goal_optimizer.api.v1.schemas import (
    OptimizeRequest,
    OptimizeResponse,
    AllocationSchema,
    RecommendationSchema,
    SummarySchema,
)
from goal_optimizer.api.dependencies import get_transactions_client, get_request_id, get_allocation_policy
from goal_optimizer.infrastructure.database.session import get_db
from goal_optimizer.infrastructure.database.repositories import OptimizationRepository
from goal_optimizer.infrastructure.clients.transactions import TransactionsClient
from goal_optimizer.domain.policy import AllocationPolicy
from goal_optimizer.domain.cashflow import summarize_cash_flow
from goal_optimizer.domain.optimizer import optimize
from goal_optimizer.domain.validation import validate_transactions
from goal_optimizer.domain.exceptions import TransactionsAPIError, InvalidGoalError, InvalidTransactionDataError
from goal_optimizer.infrastructure.observability.metrics import record_optimization, transactions_fetch_failures_counter
from goal_optimizer.infrastructure.observability.logging import log_optimization

router = APIRouter()


@router.post("/optimize", response_model=OptimizeResponse)
async def create_optimization(
    request_body: OptimizeRequest,
    request: Request,
    db: Session = Depends(get_db),
    transactions_client: TransactionsClient = Depends(get_transactions_client),
    policy: AllocationPolicy = Depends(get_allocation_policy),
):
    """
    Distribute the user's disposable income across their savings goals.

    Flow:
    1. Resolve cash flow: supplied summary, supplied transactions, or
       transactions fetched from the transactions API
    2. Score, allocate, project and build recommendations
    3. Persist the run
    4. Return the report
    """
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = request_body.as_of or date.today()

    try:
        # 1. Resolve cash flow
        if request_body.cash_flow is not None:
            cash_flow = request_body.cash_flow.to_domain()
        else:
            if request_body.transactions is not None:
                transactions = [t.to_domain() for t in request_body.transactions]
            else:
                transactions = await transactions_client.get_transactions(request_body.user_id)
            validate_transactions(transactions)
            cash_flow = summarize_cash_flow(transactions, as_of, policy.cash_flow_window_days)

        # 2. Run the optimizer
        goals = [g.to_domain() for g in request_body.goals]
        report = optimize(goals, cash_flow, as_of=as_of, policy=policy)

        # 3. Persist run
        run_repo = OptimizationRepository(db)
        db_run = run_repo.create_run(user_id=request_body.user_id, report=report)
        db.commit()

        # Record metrics and logs
        duration_ms = (time.time() - start_time) * 1000
        record_optimization(report)
        log_optimization(request_id, request_body.user_id, report, duration_ms)

        return OptimizeResponse(
            run_id=str(db_run.id),
            as_of=as_of,
            allocations=[AllocationSchema.from_domain(a) for a in report.allocations],
            recommendations=[RecommendationSchema.from_domain(r) for r in report.recommendations],
            summary=SummarySchema.from_domain(report.summary),
            message=report.message,
        )

    except TransactionsAPIError as e:
        transactions_fetch_failures_counter.inc()
        db.rollback()
        logging.error(f"Transactions API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Transactions service unavailable")

    except (InvalidGoalError, InvalidTransactionDataError) as e:
        db.rollback()
        logging.warning(f"Invalid optimization input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
