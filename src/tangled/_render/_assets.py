"""Stylesheet and client-side script for the interactive HTML graph page.

SCRIPT holds two placeholders, ``{{NODES}}`` and ``{{LINKS}}``, that are replaced
with the JSON node and link arrays before the page is written.
"""

D3_SRC = "https://d3js.org/d3.v7.min.js"

NODES_PLACEHOLDER = "{{NODES}}"
LINKS_PLACEHOLDER = "{{LINKS}}"

CSS = """
body {
    font-family: Arial, sans-serif;
    margin: 20px;
}
.node {
    stroke: #fff;
    stroke-width: 1.5px;
    cursor: pointer;
}
.link {
    stroke: #999;
    stroke-opacity: 0.6;
    marker-end: url(#arrowhead);
}
.node text {
    font-size: 12px;
    text-anchor: middle;
    pointer-events: none;
}
#tooltip {
    position: absolute;
    padding: 8px;
    background: rgba(0, 0, 0, 0.8);
    color: white;
    border-radius: 4px;
    pointer-events: none;
    opacity: 0;
}
.zoom-controls {
    position: absolute;
    top: 80px;
    left: 30px;
    background: rgba(255, 255, 255, 0.9);
    border: 1px solid #ccc;
    border-radius: 4px;
    padding: 10px;
    box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
}
.zoom-button {
    display: block;
    width: 40px;
    height: 40px;
    margin: 5px 0;
    border: 1px solid #999;
    background: #fff;
    border-radius: 4px;
    cursor: pointer;
    font-size: 18px;
    font-weight: bold;
    text-align: center;
    line-height: 38px;
    user-select: none;
}
.zoom-button:hover {
    background: #f0f0f0;
}
.zoom-button:active {
    background: #e0e0e0;
}
#graph-container {
    position: relative;
    border: 1px solid #ddd;
    border-radius: 4px;
    overflow: hidden;
}
.minimap {
    position: absolute;
    bottom: 20px;
    right: 20px;
    width: 200px;
    height: 150px;
    border: 2px solid #666;
    border-radius: 4px;
    background: rgba(255, 255, 255, 0.95);
    box-shadow: 0 2px 8px rgba(0, 0, 0, 0.2);
    cursor: pointer;
}
.minimap svg {
    width: 100%;
    height: 100%;
}
.minimap .minimap-node {
    fill: #4ecdc4;
    stroke: none;
}
.minimap .minimap-node.main {
    fill: #ff6b6b;
}
.minimap .minimap-link {
    stroke: #999;
    stroke-width: 0.5px;
    stroke-opacity: 0.3;
}
.minimap .viewport {
    fill: rgba(0, 100, 200, 0.2);
    stroke: #0064c8;
    stroke-width: 2px;
    pointer-events: none;
}
.breadcrumb-container {
    position: absolute;
    top: 60px;
    left: 20px;
    right: 240px;
    height: 40px;
    background: rgba(255, 255, 255, 0.95);
    border: 1px solid #ddd;
    border-radius: 4px;
    padding: 8px 12px;
    box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
    overflow-x: auto;
    white-space: nowrap;
    font-size: 14px;
    line-height: 24px;
}
.breadcrumb {
    display: inline-block;
    color: #666;
}
.breadcrumb-item {
    display: inline-block;
    max-width: 200px;
    overflow: hidden;
    text-overflow: ellipsis;
    vertical-align: top;
    color: #0066cc;
    cursor: pointer;
    padding: 2px 6px;
    border-radius: 3px;
    transition: background-color 0.2s;
}
.breadcrumb-item:hover {
    background-color: #f0f8ff;
    text-decoration: underline;
}
.breadcrumb-item.root {
    color: #cc0000;
    font-weight: bold;
}
.breadcrumb-item.current {
    color: #333;
    background-color: #e6f3ff;
    cursor: default;
}
.breadcrumb-item.current:hover {
    text-decoration: none;
}
.breadcrumb-separator {
    margin: 0 8px;
    color: #999;
}
.breadcrumb-empty {
    color: #999;
    font-style: italic;
}
"""

SCRIPT = """
const width = 1200;
const height = 800;

const nodes = {{NODES}};
const links = {{LINKS}};

const svg = d3.select("#graph")
    .append("svg")
    .attr("width", width)
    .attr("height", height);

// Create a container group for zoom/pan transformations
const g = svg.append("g");

// Define zoom behavior
const zoom = d3.zoom()
    .scaleExtent([0.1, 10])
    .on("zoom", function(event) {
        g.attr("transform", event.transform);
    });

// Apply zoom behavior to SVG
svg.call(zoom);

// Define arrow marker
svg.append("defs").append("marker")
    .attr("id", "arrowhead")
    .attr("viewBox", "0 -5 10 10")
    .attr("refX", 15)
    .attr("refY", 0)
    .attr("markerWidth", 6)
    .attr("markerHeight", 6)
    .attr("orient", "auto")
    .append("path")
    .attr("d", "M0,-5L10,0L0,5")
    .attr("fill", "#999");

const simulation = d3.forceSimulation(nodes)
    .force("link", d3.forceLink(links).id(d => d.id).distance(100))
    .force("charge", d3.forceManyBody().strength(-300))
    .force("center", d3.forceCenter(width / 2, height / 2));

const link = g.append("g")
    .selectAll("line")
    .data(links)
    .join("line")
    .attr("class", "link");

const node = g.append("g")
    .selectAll("circle")
    .data(nodes)
    .join("circle")
    .attr("class", "node")
    .attr("r", 8)
    .attr("fill", d => d.group === 2 ? "#ff6b6b" : "#4ecdc4")
    .call(d3.drag()
        .on("start", dragstarted)
        .on("drag", dragged)
        .on("end", dragended));

const tooltip = d3.select("#tooltip");

node.on("mouseover", function(event, d) {
    tooltip.style("opacity", 1)
        .style("left", (event.pageX + 10) + "px")
        .style("top", (event.pageY - 10) + "px")
        .text(d.name);
})
.on("mouseout", function() {
    tooltip.style("opacity", 0);
})
.on("click", function(event, d) {
    event.stopPropagation();
    selectedNode = d;
    updateBreadcrumb(d);
    highlightPath(d);
});

simulation.on("tick", () => {
    link
        .attr("x1", d => d.source.x)
        .attr("y1", d => d.source.y)
        .attr("x2", d => d.target.x)
        .attr("y2", d => d.target.y);

    node
        .attr("cx", d => d.x)
        .attr("cy", d => d.y);
});

function dragstarted(event, d) {
    if (!event.active) simulation.alphaTarget(0.3).restart();
    d.fx = d.x;
    d.fy = d.y;
}

function dragged(event, d) {
    d.fx = event.x;
    d.fy = event.y;
}

function dragended(event, d) {
    if (!event.active) simulation.alphaTarget(0);
    d.fx = null;
    d.fy = null;
}

// Zoom control functions
function zoomIn() {
    svg.transition().duration(300).call(
        zoom.scaleBy, 1.5
    );
}

function zoomOut() {
    svg.transition().duration(300).call(
        zoom.scaleBy, 1 / 1.5
    );
}

function resetZoom() {
    svg.transition().duration(500).call(
        zoom.transform,
        d3.zoomIdentity
    );
}

// Add event listeners to zoom buttons
d3.select("#zoom-in").on("click", zoomIn);
d3.select("#zoom-out").on("click", zoomOut);
d3.select("#reset-zoom").on("click", resetZoom);

// Prevent zoom controls from interfering with drag
d3.selectAll(".zoom-controls").on("mousedown", function(event) {
    event.stopPropagation();
});

// Minimap implementation
const minimapWidth = 200;
const minimapHeight = 150;

const minimapSvg = d3.select("#minimap")
    .append("svg")
    .attr("width", minimapWidth)
    .attr("height", minimapHeight);

const minimapG = minimapSvg.append("g");

// Calculate bounds of all nodes
function calculateGraphBounds() {
    if (nodes.length === 0) return { minX: 0, minY: 0, maxX: width, maxY: height };
    
    let minX = d3.min(nodes, d => d.x || 0);
    let maxX = d3.max(nodes, d => d.x || 0);
    let minY = d3.min(nodes, d => d.y || 0);
    let maxY = d3.max(nodes, d => d.y || 0);
    
    // Add padding
    const padding = 50;
    minX -= padding;
    maxX += padding;
    minY -= padding;
    maxY += padding;
    
    return { minX, minY, maxX, maxY };
}

// Create minimap scale functions
let minimapScaleX, minimapScaleY;

function updateMinimapScales() {
    const bounds = calculateGraphBounds();
    const graphWidth = bounds.maxX - bounds.minX;
    const graphHeight = bounds.maxY - bounds.minY;
    
    minimapScaleX = d3.scaleLinear()
        .domain([bounds.minX, bounds.maxX])
        .range([0, minimapWidth]);
        
    minimapScaleY = d3.scaleLinear()
        .domain([bounds.minY, bounds.maxY])
        .range([0, minimapHeight]);
}

// Create minimap elements
const minimapLinks = minimapG.selectAll(".minimap-link")
    .data(links)
    .join("line")
    .attr("class", "minimap-link");

const minimapNodes = minimapG.selectAll(".minimap-node")
    .data(nodes)
    .join("circle")
    .attr("class", d => d.group === 2 ? "minimap-node main" : "minimap-node")
    .attr("r", 1.5);

// Viewport indicator
const viewport = minimapSvg.append("rect")
    .attr("class", "viewport");

// Update minimap positions
function updateMinimap() {
    updateMinimapScales();
    
    minimapLinks
        .attr("x1", d => minimapScaleX(d.source.x))
        .attr("y1", d => minimapScaleY(d.source.y))
        .attr("x2", d => minimapScaleX(d.target.x))
        .attr("y2", d => minimapScaleY(d.target.y));

    minimapNodes
        .attr("cx", d => minimapScaleX(d.x))
        .attr("cy", d => minimapScaleY(d.y));
        
    updateViewportIndicator();
}

// Update viewport indicator based on current zoom/pan
function updateViewportIndicator() {
    if (!minimapScaleX || !minimapScaleY) return;
    
    const transform = d3.zoomTransform(svg.node());
    const bounds = calculateGraphBounds();
    
    // Calculate visible area in graph coordinates
    const visibleLeft = (-transform.x) / transform.k;
    const visibleTop = (-transform.y) / transform.k;
    const visibleRight = visibleLeft + width / transform.k;
    const visibleBottom = visibleTop + height / transform.k;
    
    // Convert to minimap coordinates
    const minimapLeft = minimapScaleX(visibleLeft);
    const minimapTop = minimapScaleY(visibleTop);
    const minimapRight = minimapScaleX(visibleRight);
    const minimapBottom = minimapScaleY(visibleBottom);
    
    viewport
        .attr("x", Math.max(0, minimapLeft))
        .attr("y", Math.max(0, minimapTop))
        .attr("width", Math.max(0, Math.min(minimapWidth, minimapRight) - Math.max(0, minimapLeft)))
        .attr("height", Math.max(0, Math.min(minimapHeight, minimapBottom) - Math.max(0, minimapTop)));
}

// Update minimap on simulation tick
simulation.on("tick", () => {
    link
        .attr("x1", d => d.source.x)
        .attr("y1", d => d.source.y)
        .attr("x2", d => d.target.x)
        .attr("y2", d => d.target.y);

    node
        .attr("cx", d => d.x)
        .attr("cy", d => d.y);
        
    updateMinimap();
});

// Update viewport indicator on zoom
zoom.on("zoom", function(event) {
    g.attr("transform", event.transform);
    updateViewportIndicator();
});

// Minimap click interaction - pan to clicked location
minimapSvg.on("click", function(event) {
    if (!minimapScaleX || !minimapScaleY) return;
    
    const [mouseX, mouseY] = d3.pointer(event);
    
    // Convert minimap coordinates back to graph coordinates
    const graphX = minimapScaleX.invert(mouseX);
    const graphY = minimapScaleY.invert(mouseY);
    
    // Center the main view on this point
    const transform = d3.zoomTransform(svg.node());
    const newX = width / 2 - graphX * transform.k;
    const newY = height / 2 - graphY * transform.k;
    
    svg.transition().duration(500).call(
        zoom.transform,
        d3.zoomIdentity.translate(newX, newY).scale(transform.k)
    );
});

// Prevent minimap from interfering with main graph interactions
d3.select("#minimap").on("mousedown", function(event) {
    event.stopPropagation();
});

// Breadcrumb trail implementation
const mainModuleName = nodes.find(n => n.group === 2)?.name || nodes[0]?.name;
let selectedNode = null;

// Build adjacency list for path finding (reversed - from dependencies to dependents)
const dependents = new Map();
links.forEach(link => {
    const fromId = link.source.id || link.source;
    const toId = link.target.id || link.target;
    
    if (!dependents.has(toId)) {
        dependents.set(toId, []);
    }
    dependents.get(toId).push(fromId);
});

// Find path from main module to target node using BFS
function findPathToNode(targetNodeId) {
    if (!mainModuleName) return [];
    
    const mainNode = nodes.find(n => n.name === mainModuleName);
    if (!mainNode || mainNode.id === targetNodeId) return [mainNode];
    
    const queue = [{node: mainNode, path: [mainNode]}];
    const visited = new Set([mainNode.id]);
    
    while (queue.length > 0) {
        const {node, path} = queue.shift();
        
        // Get direct dependencies of current node
        const nodeDependencies = links
            .filter(link => {
                const sourceId = link.source.id || link.source;
                return sourceId === node.id;
            })
            .map(link => {
                const targetId = link.target.id || link.target;
                return nodes.find(n => n.id === targetId);
            })
            .filter(n => n);
        
        for (const depNode of nodeDependencies) {
            if (depNode.id === targetNodeId) {
                return [...path, depNode];
            }
            
            if (!visited.has(depNode.id)) {
                visited.add(depNode.id);
                queue.push({node: depNode, path: [...path, depNode]});
            }
        }
    }
    
    return []; // No path found
}

// Update breadcrumb display
function updateBreadcrumb(targetNode) {
    const breadcrumbEl = d3.select("#breadcrumb");
    
    if (!targetNode) {
        breadcrumbEl.html('<span class="breadcrumb-empty">Click a node to see its dependency path</span>');
        return;
    }
    
    const path = findPathToNode(targetNode.id);
    
    if (path.length === 0) {
        breadcrumbEl.html(
            '<span class="breadcrumb-empty">No dependency path found to:</span>' +
            '<span class="breadcrumb-item current">' + truncateModuleName(targetNode.name) + '</span>'
        );
        return;
    }
    
    let html = '';
    path.forEach((node, index) => {
        const isRoot = node.group === 2;
        const isCurrent = index === path.length - 1;
        const classes = ['breadcrumb-item'];
        
        if (isRoot) classes.push('root');
        if (isCurrent) classes.push('current');
        
        const truncatedName = truncateModuleName(node.name);
        
        if (index > 0) {
            html += '<span class="breadcrumb-separator">→</span>';
        }
        
        html += '<span class="' + classes.join(' ') + '" data-node-id="' + node.id + '" title="' + node.name + '">' + truncatedName + '</span>';
    });
    
    breadcrumbEl.html(html);
}

// Truncate long module names for display
function truncateModuleName(name) {
    if (name.length <= 40) return name;
    
    const parts = name.split('/');
    if (parts.length > 2) {
        return parts[0] + '/.../' + parts[parts.length - 1];
    }
    
    return name.substring(0, 37) + '...';
}

// Highlight path in the graph
function highlightPath(targetNode) {
    // Reset all highlighting
    node.attr("stroke", "#fff").attr("stroke-width", 1.5);
    link.attr("stroke", "#999").attr("stroke-opacity", 0.6);
    
    if (!targetNode) return;
    
    const path = findPathToNode(targetNode.id);
    if (path.length === 0) return;
    
    // Highlight path nodes
    const pathNodeIds = new Set(path.map(n => n.id));
    node.attr("stroke", d => pathNodeIds.has(d.id) ? "#ff6600" : "#fff")
        .attr("stroke-width", d => pathNodeIds.has(d.id) ? 3 : 1.5);
    
    // Highlight path links
    const pathLinks = [];
    for (let i = 0; i < path.length - 1; i++) {
        const fromId = path[i].id;
        const toId = path[i + 1].id;
        
        const pathLink = links.find(link => {
            const sourceId = link.source.id || link.source;
            const targetId = link.target.id || link.target;
            return sourceId === fromId && targetId === toId;
        });
        
        if (pathLink) pathLinks.push(pathLink);
    }
    
    link.attr("stroke", d => {
        const sourceId = d.source.id || d.source;
        const targetId = d.target.id || d.target;
        return pathLinks.some(pl => {
            const plSourceId = pl.source.id || pl.source;
            const plTargetId = pl.target.id || pl.target;
            return plSourceId === sourceId && plTargetId === targetId;
        }) ? "#ff6600" : "#999";
    })
    .attr("stroke-opacity", d => {
        const sourceId = d.source.id || d.source;
        const targetId = d.target.id || d.target;
        return pathLinks.some(pl => {
            const plSourceId = pl.source.id || pl.source;
            const plTargetId = pl.target.id || pl.target;
            return plSourceId === sourceId && plTargetId === targetId;
        }) ? 1 : 0.6;
    });
}

// Add breadcrumb click navigation
d3.select("#breadcrumb").on("click", function(event) {
    const target = event.target;
    if (target.classList.contains("breadcrumb-item") && !target.classList.contains("current")) {
        const nodeId = parseInt(target.getAttribute("data-node-id"));
        const node = nodes.find(n => n.id === nodeId);
        if (node) {
            selectedNode = node;
            updateBreadcrumb(node);
            highlightPath(node);
            
            // Center view on selected node
            const transform = d3.zoomTransform(svg.node());
            const newX = width / 2 - node.x * transform.k;
            const newY = height / 2 - node.y * transform.k;
            
            svg.transition().duration(500).call(
                zoom.transform,
                d3.zoomIdentity.translate(newX, newY).scale(transform.k)
            );
        }
    }
});

// Clear selection when clicking on empty space
svg.on("click", function(event) {
    if (event.target === this) {
        selectedNode = null;
        updateBreadcrumb(null);
        highlightPath(null);
    }
});

// Prevent breadcrumb container from interfering with interactions
d3.select(".breadcrumb-container").on("mousedown", function(event) {
    event.stopPropagation();
});
"""
