from __future__ import annotations

import asyncio
import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from codedoc.config import AnalyzerConfig
from codedoc.document import load_document, to_document
from codedoc.errors import DocumentError, RootNotFoundError
from codedoc.graph import build_graph
from codedoc.logging_config import get_logger
from codedoc.model import GraphData
from codedoc.pipeline import analyze_code_async


logger = get_logger("api")

app = FastAPI(title="Code Is Document Analyzer")


class AnalyzeRequest(BaseModel):
	root_path: str
	alias_prefix: Optional[str] = None
	alias_target: Optional[str] = None


class GraphRequest(AnalyzeRequest):
	document_path: Optional[str] = None


def _config(req: AnalyzeRequest) -> AnalyzerConfig:
	return AnalyzerConfig().with_overrides(alias_prefix=req.alias_prefix, alias_target=req.alias_target)


@app.post("/analyze")
async def analyze(req: AnalyzeRequest) -> Dict[str, Any]:
	root = os.path.abspath(req.root_path)
	try:
		structure = await analyze_code_async(root, _config(req))
	except RootNotFoundError as e:
		raise HTTPException(status_code=400, detail=str(e))
	return to_document(structure)


@app.post("/graph", response_model=GraphData)
async def graph(req: GraphRequest) -> GraphData:
	root = os.path.abspath(req.root_path)
	config = _config(req)
	try:
		if req.document_path:
			structure = await asyncio.to_thread(load_document, req.document_path)
		else:
			structure = await analyze_code_async(root, config)
	except (RootNotFoundError, DocumentError) as e:
		raise HTTPException(status_code=400, detail=str(e))
	# Extension probing reads the disk.
	data = await asyncio.to_thread(build_graph, structure, config)
	logger.info("Graph for %s: %d nodes, %d links", structure.root.path, len(data.nodes), len(data.links))
	return data


def create_app() -> FastAPI:
	return app
