"""Dashboard Dash para monitoreo y gestión de pozos y motocompresores"""

import sys
from pathlib import Path

# Añadir src al path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import asyncio
import logging

import dash
from dash import dcc, html, Output, Input, State, ALL, callback_context
from dash.exceptions import PreventUpdate

from config import settings
from backend import SITES, api_client
from backend.exceptions import CatalogError, FetchFailure
from services.aggregation import availability_breakdown, count_by_site
from services.app_state import AppState
from services.charts import status_count_figure, status_share_figure, wells_by_site_figure
from services.filters import highlight_segments
from services.selection import WellDetail

logger = logging.getLogger(__name__)

# Estado de la sesión del dashboard
app_state = AppState(api_client)

app = dash.Dash(__name__, suppress_callback_exceptions=True, title=settings.dashboard.title)
server = app.server


def run_async(coro):
    """Ejecutar una corrutina del núcleo desde un callback síncrono de Dash"""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def kpi_card(icon: str, value_id: str, label: str) -> html.Div:
    return html.Div([
        html.H3(icon, className="metric-icon"),
        html.H4(id=value_id, children="0"),
        html.P(label)
    ], className="metric-card")


def field(label: str, value) -> html.Div:
    return html.Div([
        html.Label(label),
        dcc.Input(value="" if value is None else str(value), readOnly=True, className="form-input")
    ], className="form-field")


dashboard_tab = html.Div([
    html.Div([
        kpi_card("🛠️", "kpi-total", "Total MTC"),
        kpi_card("🟢", "kpi-operating", "Operando"),
        kpi_card("🔵", "kpi-available", "Disponibles"),
        kpi_card("🏭", "kpi-sites", "Activos"),
    ], className="metrics-panel"),
    html.Div(id="dashboard-status", className="status-banner"),
    html.Div([
        html.Div([dcc.Graph(id="chart-status-count")], className="chart-container"),
        html.Div([dcc.Graph(id="chart-status-share")], className="chart-container"),
    ], className="charts-row"),
    html.Div([dcc.Graph(id="chart-wells-site")], className="chart-container"),
])

gestion_tab = html.Div([
    html.Div([
        html.Button(
            name,
            id={"type": "site-button", "site": name},
            n_clicks=0,
            className="btn-activo"
        )
        for name in SITES.values()
    ], className="sites-panel"),
    html.Div([
        # Lista de pozos
        html.Div([
            html.Div([
                html.H3(id="site-name", children=settings.dashboard.default_site),
                html.Span(id="wells-count", className="badge"),
            ], className="list-header"),
            dcc.Input(id="search-input", type="text", placeholder="Buscar...", debounce=False, value=""),
            html.Div(id="well-list", className="well-list"),
        ], className="sidebar"),
        # Detalle
        html.Div([
            html.Div(id="breadcrumb", className="breadcrumb"),
            html.H2(id="main-title"),
            html.Div(id="status-banner", className="status-banner"),
            html.Div(id="detail-panel"),
            html.Div([
                html.Label("Dirección IP (equipo POZO)"),
                dcc.Input(id="input-ip", type="text", value=""),
                html.Button("Actualizar IP", id="btn-update-ip", n_clicks=0),
                html.Div(id="ip-status", className="status-banner"),
            ], className="ip-section"),
        ], className="main-content"),
    ], className="gestion-layout"),
])

app.layout = html.Div([
    html.Div([
        html.H1(settings.dashboard.title, className="dashboard-title"),
    ], className="header"),
    dcc.Tabs(id="main-tabs", value="gestion", children=[
        dcc.Tab(label="📋 Gestión", value="gestion", children=[gestion_tab]),
        dcc.Tab(label="📊 Dashboard", value="dashboard", children=[dashboard_tab]),
    ]),
    dcc.Store(id="selection-reset", data=0),
], className="dashboard-container")


def render_well_item(well, term: str) -> html.Button:
    status_class = "status-disponible" if app_state.is_operating(well) else "status-no-disponible"
    name = [html.Mark(chunk) if matched else chunk for chunk, matched in highlight_segments(well.name, term)]
    code_text = well.gateway_code or "N/A"
    code = [html.Mark(chunk) if matched else chunk for chunk, matched in highlight_segments(code_text, term)]
    return html.Button([
        html.Div(name, className="mtc-name"),
        html.Div(code, className="mtc-code"),
    ], id={"type": "well-item", "id": well.id}, n_clicks=0, className=f"motocompresor-item {status_class}")


def render_detail(detail: WellDetail) -> html.Div:
    well, mtc = detail.well, detail.mtc_record
    install_date = mtc.install_date.date().isoformat() if mtc and mtc.install_date else ""
    status_label = mtc.status.label if mtc and mtc.status else ""
    auxiliary = detail.auxiliary_equipment

    return html.Div([
        html.H3("Pozo"),
        field("Nombre", well.name),
        field("Estatus", "Activo" if well.active else "Inactivo"),
        field("Esclavo (KepServer)", well.gateway_code),
        field("Sector", well.sector_id),
        field("Activo", detail.summary.site_name),
        html.H3("Motocompresor"),
        field("Descripción", mtc.description if mtc else "No asignado"),
        field("Patín", mtc.skid_label if mtc else ""),
        field("Disponible", status_label),
        field("Fecha de instalación", install_date),
        html.H3(f"Otros Equipos ({len(auxiliary)})"),
        html.Ul([
            html.Li(
                f"{item.description or 'Sin descripción'} | ID: {item.id} | "
                f"Identificador: {item.identifier or 'N/A'} | IP: {item.ip_address or 'N/A'}"
                + (f" | Marca: {item.brand}" if item.brand else "")
                + (f" | Modelo: {item.model}" if item.model else "")
            )
            for item in auxiliary
        ]) if auxiliary else html.P("No hay otros equipos registrados", className="muted"),
    ], className="detail-view")


def empty_state() -> html.Div:
    return html.Div("Selecciona un pozo de la lista para ver su información", className="empty-state")


@app.callback(
    [Output("well-list", "children"),
     Output("wells-count", "children"),
     Output("site-name", "children"),
     Output("search-input", "value"),
     Output({"type": "site-button", "site": ALL}, "className"),
     Output("selection-reset", "data")],
    [Input({"type": "site-button", "site": ALL}, "n_clicks"),
     Input("search-input", "value")],
    [State("selection-reset", "data")]
)
def update_well_list(site_clicks, search_value, reset_counter):
    """Actualizar la lista de pozos según activo y búsqueda"""
    triggered = callback_context.triggered_id
    reset = dash.no_update

    try:
        if triggered is None:
            run_async(app_state.initialize())
            reset = (reset_counter or 0) + 1
        elif isinstance(triggered, dict) and triggered.get("type") == "site-button":
            run_async(app_state.ensure_loaded())
            app_state.set_site_filter(triggered["site"])
            reset = (reset_counter or 0) + 1
        else:
            app_state.set_search_term(search_value)
    except FetchFailure as e:
        logger.error(f"❌ Error al inicializar gestión: {e}")
        return (
            html.Div(f"Error al cargar datos de gestión: {e}", className="error"),
            "0",
            app_state.site_filter or "",
            app_state.search_term,
            ["btn-activo"] * len(site_clicks),
            reset
        )

    wells = app_state.visible_wells()
    if wells:
        items = [render_well_item(well, app_state.search_term) for well in wells]
    elif app_state.search_term:
        items = html.Div("No se encontraron pozos con los criterios de búsqueda", className="muted")
    else:
        items = html.Div("No hay pozos en este activo", className="muted")

    classes = [
        "btn-activo active" if name == app_state.site_filter else "btn-activo"
        for name in SITES.values()
    ]
    return items, app_state.results_label(), app_state.site_filter or "Todos", app_state.search_term, classes, reset


@app.callback(
    [Output("detail-panel", "children"),
     Output("main-title", "children"),
     Output("breadcrumb", "children"),
     Output("status-banner", "children"),
     Output("input-ip", "value")],
    [Input({"type": "well-item", "id": ALL}, "n_clicks"),
     Input("selection-reset", "data")]
)
def update_detail(item_clicks, reset_counter):
    """Seleccionar un pozo y mostrar su información completa"""
    triggered_props = [entry["prop_id"] for entry in callback_context.triggered]
    triggered = callback_context.triggered_id

    if any(prop.startswith("selection-reset") for prop in triggered_props):
        app_state.clear_selection()
        return empty_state(), app_state.title(), " › ".join(app_state.breadcrumb()), "", ""

    clicked = [entry for entry in callback_context.triggered if entry.get("value")]
    if not isinstance(triggered, dict) or not clicked:
        raise PreventUpdate

    try:
        detail = run_async(app_state.select_well(triggered["id"]))
    except FetchFailure as e:
        return (
            empty_state(),
            app_state.title(),
            " › ".join(app_state.breadcrumb()),
            html.Div(f"Error al cargar información del pozo: {e}", className="error"),
            ""
        )

    if detail is None:
        raise PreventUpdate

    primary = detail.primary_equipment
    return (
        render_detail(detail),
        app_state.title(),
        " › ".join(app_state.breadcrumb()),
        f"✅ '{detail.well.name}' cargado: {detail.summary.equipment_count} equipos encontrados",
        (primary.ip_address or "") if primary else ""
    )


@app.callback(
    Output("ip-status", "children"),
    [Input("btn-update-ip", "n_clicks")],
    [State("input-ip", "value")],
    prevent_initial_call=True
)
def update_ip(n_clicks, new_ip):
    """Actualizar la dirección IP del equipo POZO"""
    if not n_clicks:
        raise PreventUpdate
    try:
        updated = run_async(app_state.update_ip(new_ip))
    except CatalogError as e:
        return html.Div(f"Error al actualizar la dirección IP: {e}", className="error")
    return f"✅ Dirección IP actualizada correctamente ({updated.ip_address})"


@app.callback(
    [Output("kpi-total", "children"),
     Output("kpi-operating", "children"),
     Output("kpi-available", "children"),
     Output("kpi-sites", "children"),
     Output("chart-status-count", "figure"),
     Output("chart-status-share", "figure"),
     Output("chart-wells-site", "figure"),
     Output("dashboard-status", "children")],
    [Input("main-tabs", "value")]
)
def update_dashboard(tab):
    """Actualizar KPIs y gráficas del dashboard"""
    if tab != "dashboard":
        raise PreventUpdate
    try:
        run_async(app_state.ensure_loaded())
    except FetchFailure as e:
        logger.error(f"❌ Error al inicializar dashboard: {e}")
        status = html.Div(f"Error al cargar datos del dashboard: {e}", className="error")
        return ("-",) * 4 + (dash.no_update,) * 3 + (status,)

    kpis = app_state.kpis()
    rows = availability_breakdown(app_state.store.mtc_records)
    return (
        kpis.total_mtc,
        kpis.operating,
        kpis.available,
        kpis.sites,
        status_count_figure(rows),
        status_share_figure(rows),
        wells_by_site_figure(count_by_site(app_state.store.wells)),
        ""
    )


# CSS personalizado
app.index_string = '''
<!DOCTYPE html>
<html>
    <head>
        {%metas%}
        <title>{%title%}</title>
        {%favicon%}
        {%css%}
        <style>
            .dashboard-container {
                font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
                margin: 0;
                padding: 20px;
                background-color: #121212;
                color: #e0e0e0;
            }
            .header {
                background: #1f1f1f;
                padding: 20px;
                border-radius: 10px;
                margin-bottom: 20px;
                text-align: center;
            }
            .dashboard-title { margin: 0; font-size: 2em; font-weight: 300; }
            .metrics-panel {
                display: grid;
                grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
                gap: 20px;
                margin: 20px 0;
            }
            .metric-card, .chart-container, .sidebar, .main-content {
                background: #1f1f1f;
                padding: 20px;
                border-radius: 8px;
                margin-bottom: 20px;
            }
            .charts-row { display: grid; grid-template-columns: 1fr 1fr; gap: 20px; }
            .gestion-layout { display: grid; grid-template-columns: 320px 1fr; gap: 20px; }
            .sites-panel { display: flex; gap: 10px; margin: 20px 0; }
            .btn-activo.active { background: #4a9eff; }
            .motocompresor-item {
                display: block;
                width: 100%;
                text-align: left;
                margin-bottom: 6px;
                background: #2a2a2a;
            }
            .status-disponible { border-left: 4px solid #4caf50; }
            .status-no-disponible { border-left: 4px solid #f44336; }
            .mtc-code, .muted { color: #999; font-size: 0.9em; }
            mark { background: #4a9eff; color: #fff; }
            .error { color: #f44336; }
            .empty-state { padding: 40px; text-align: center; color: #666; }
            button {
                background: #333;
                color: #e0e0e0;
                border: none;
                padding: 8px 16px;
                border-radius: 4px;
                cursor: pointer;
            }
        </style>
    </head>
    <body>
        {%app_entry%}
        <footer>
            {%config%}
            {%scripts%}
            {%renderer%}
        </footer>
    </body>
</html>
'''

# Función para ejecutar el dashboard
def run_dashboard():
    """Ejecutar el dashboard"""
    logging.basicConfig(
        level=getattr(logging, settings.logging.level.upper(), logging.INFO),
        format=settings.logging.format,
        handlers=settings.logging.handlers()
    )
    logger.info(f"🚀 Sistema de Motocompresores iniciado | API: {settings.api.base_url}")
    app.run(
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        debug=settings.dashboard.debug
    )

if __name__ == "__main__":
    run_dashboard()
