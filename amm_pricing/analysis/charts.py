"""Visualization utilities for depth ladders."""

import plotly.graph_objects as go
import pandas as pd
from plotly.subplots import make_subplots


def create_depth_chart(ladder: pd.DataFrame, title: str = "Price Impact by Trade Size"):
    """Price impact and dynamic fee (bps) against trade size, log x-axis."""
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    fig.add_trace(go.Scatter(
        x=ladder['amount_in'],
        y=ladder['price_impact_bps'],
        mode='lines+markers',
        name='Price impact (bps)',
        marker=dict(size=8, color='#4CAF50')
    ), secondary_y=False)

    fig.add_trace(go.Scatter(
        x=ladder['amount_in'],
        y=ladder['dynamic_fee_bps'],
        mode='lines+markers',
        name='Dynamic fee (bps)',
        marker=dict(size=8, color='#FF9800')
    ), secondary_y=True)

    fig.update_layout(
        title=title,
        xaxis_title='Amount in',
        hovermode='x unified',
        template='plotly_white',
        height=400
    )
    fig.update_xaxes(type='log')
    fig.update_yaxes(title_text='Price impact (bps)', secondary_y=False)
    fig.update_yaxes(title_text='Dynamic fee (bps)', secondary_y=True)

    return fig


def create_execution_price_chart(ladder: pd.DataFrame, spot_price: float):
    """Effective execution price against trade size, with the spot price for reference."""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=ladder['amount_in'],
        y=ladder['effective_price'],
        mode='lines+markers',
        name='Execution price',
        marker=dict(size=8, color='#2196F3')
    ))

    fig.add_hline(y=spot_price, line_dash='dash', annotation_text='Spot')

    fig.update_layout(
        title='Execution Price by Trade Size',
        xaxis_title='Amount in',
        yaxis_title='Output per input',
        template='plotly_white',
        height=400
    )
    fig.update_xaxes(type='log')

    return fig
