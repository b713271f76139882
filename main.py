import streamlit as st
import pandas as pd
import plotly.express as px

from prizecheck.config import configure_logging
from prizecheck.errors import VerificationError
from prizecheck.evaluator import TicketEvaluator, validate_ticket
from prizecheck.lottery import GameType, resolve_game_type
from prizecheck.models import Ticket
from prizecheck.prize import level_name
from prizecheck.recognition import parse_manual_rows, parse_recognizer_output
from prizecheck.results import StaticResultsLookup, HistoryResultsLookup

configure_logging()

st.set_page_config(page_title="彩票验奖", layout="wide", initial_sidebar_state="expanded")

# --- Initialization ---
@st.cache_resource
def get_history_lookup():
    return HistoryResultsLookup()

# --- Sidebar ---
st.sidebar.title("验奖设置")

input_mode = st.sidebar.radio("录入方式", ["手动录入", "识别结果 (JSON)"])
source = st.sidebar.selectbox("开奖数据", ["内置样例", "历史开奖 (500.com)"])
strict = st.sidebar.checkbox("严格校验号码格式", value=False)

lookup = StaticResultsLookup() if source == "内置样例" else get_history_lookup()
evaluator = TicketEvaluator(lookup)

with st.expander("查看奖级规则"):
    st.markdown("""
    **双色球** 6+1 一等奖 500万 · 6+0 二等奖 10万 · 5+1 3000元 · 5+0/4+1 200元 · 4+0/3+1 10元 · 其余中蓝球 5元
    (复式票按所有6红组合 × 所选蓝球逐注计奖)

    **大乐透** 5+2 1000万 · 5+1 20万 · 5+0 1万 · 4+2 3000元 · 4+1 300元 · 3+2 200元 · 4+0 100元 · 3+1/2+2 15元 · 3+0/2+1/1+2/0+2 5元

    **排列5** 五位按位全中 10万
    """)

# --- Ticket Input ---
st.title("🎫 彩票验奖")

tickets = []
if input_mode == "手动录入":
    col1, col2 = st.columns(2)
    with col1:
        game_label = st.selectbox("彩种", ["双色球", "大乐透", "排列5", "其他"])
    with col2:
        issue = st.text_input("期号", value="2025107")
    rows_text = st.text_area(
        "号码 (每行一注，红球 + 蓝球 x倍数)",
        placeholder="02 11 15 21 28 33 + 07 x2\n01 05 12 18 25 30 31 + 08",
        height=150
    )
    if rows_text.strip():
        try:
            rows = parse_manual_rows(rows_text, resolve_game_type(game_label))
            tickets = [Ticket(game_label=game_label, issue=issue.strip(), rows=rows)]
        except VerificationError as e:
            st.error(f"号码格式错误: {e}")
else:
    raw = st.text_area("粘贴识别结果", height=250, placeholder='[{"type": "双色球", "issue": "2025107", "tickets": [...]}]')
    if raw.strip():
        try:
            tickets = parse_recognizer_output(raw)
        except VerificationError as e:
            st.error(f"识别结果解析失败: {e}")

# --- Verification ---
if tickets and st.button("开始验奖", type="primary"):
    if strict:
        for t in tickets:
            try:
                validate_ticket(t)
            except VerificationError as e:
                st.warning(f"{t.game_label} {t.issue}: {e}")

    with st.spinner("验奖中..."):
        results = evaluator.evaluate_batch(tickets)

    grand_total = sum(r.total_prize for r in results)
    c1, c2 = st.columns(2)
    c1.metric("票数", len(results))
    c2.metric("合计奖金", f"¥{grand_total:,}")

    for res in results:
        st.subheader(f"第 {res.ticket_index} 张 · {res.ticket.game_label} 第{res.ticket.issue}期")
        if res.error:
            st.error(res.error)
            continue
        if res.game_type == GameType.UNSUPPORTED:
            st.info(res.details[0].status)
            continue

        df = pd.DataFrame([
            {
                '注': d.row_index,
                '红球': " ".join(row.red),
                '蓝球': " ".join(row.blue),
                '倍数': row.multiplier,
                '奖级': level_name(d.level),
                '奖金': d.prize,
                '状态': d.status,
            }
            for d, row in zip(res.details, res.ticket.rows)
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.caption(f"本票奖金: ¥{res.total_prize:,}")

        if res.total_prize > 0:
            fig = px.bar(df, x='注', y='奖金')
            fig.update_traces(marker_color='#f44336')
            st.plotly_chart(fig, use_container_width=True)

    with st.expander("原始结果 (JSON)"):
        st.json([r.to_dict() for r in results])

st.markdown("---")
st.caption("验奖结果仅供参考，请以官方开奖公告为准。")
