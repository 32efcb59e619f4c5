from django.urls import path

from intranet.simulators.api import simples_das_compare, simulator_report, simulator_run

urlpatterns = [
    path("simulators/simples-das/compare", simples_das_compare, name="simples-das-compare"),
    path("simulators/<str:simulator_key>/run", simulator_run, name="simulator-run"),
    path("simulators/<str:simulator_key>/report", simulator_report, name="simulator-report"),
]
